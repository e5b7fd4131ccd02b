# colorcast

colorcast reads a 24-bit or 32-bit BMP image, counts its distinct colours,
and sends the most frequent ones to a server that draws them as an SVG pie
chart. It also ships a small echo server and client for plain text messages,
a directory lister, and a handful of small exercises.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

The servers and the client talk over TCP on port 8089 by default. Each
server takes `--host` and `--port`; the client takes `--host` (default
`127.0.0.1`) and `--port`.

### Colour server

```
colorcast-server [--host HOST] [--port PORT] [--svg PATH]
```

The server accepts one client at a time and reads a single message from each
connection. A message whose first word is `message:` is sent back unchanged.
Anything else is taken as a colour list: it is drawn as a pie chart, written
to `pie_chart.svg` (or the `--svg` path), and then opened with `firefox`.
Ctrl+C stops the server.

### Client

Send the dominant colours of an image:

```
colorcast-client picture.bmp
```

The client sends a line of the form

```
couleurs: 10,#ff0000,#00ff00,...
```

that is, the number of distinct colours capped at ten, followed by up to ten
colours in hexadecimal, most frequent first. The least frequent colour of the
image is never listed.

Run without a path, the client prompts for text messages, sends each one
prefixed with `message: ` and prints the reply, until the end of input. Given
more than one argument, it sends a single message read from standard input.

### Echo server

```
colorcast-echo-server [--host HOST] [--port PORT]
```

Each client is served in its own thread until it disconnects; every message
whose first word is `message:` is answered with the same text, and other
messages get no reply.

### Directory lister

```
colorcast-ls some/directory
```

Prints `.`, `..` and then the name of every entry in the directory.

### Exercises

```
colorcast-exercises [bits|chaine|etudiant|fibonacci|puissance]
```

Runs one exercise, or all of them in turn: a test of two bits of a number,
joining two words, a student report, the first seven Fibonacci numbers, and
2 to the power 4.

## Library use

```python
from colorcast.bmp import analyze_bmp_image
from colorcast.chart import write_pie_chart
from colorcast.client import build_colors_message

counter = analyze_bmp_image("picture.bmp")
message = build_colors_message(counter)
write_pie_chart(message, "pie_chart.svg")
```

- `colorcast.colors` holds `Color`, `ColorCount`, `ColorCounter` and
  `BitDepth`; `count_colors` tallies a sequence of pixels in order of first
  appearance, `ColorCounter.sort` orders the counts least frequent first, and
  `format_colors` / `format_counts` render them as text.
- `colorcast.bmp` parses the headers (`BmpHeader`, `BmpInfoHeader`), reads
  pixel data with `read_pixels`, and counts and sorts colours with
  `analyze_bmp_image`. It raises `BmpError` for files that are not BMP images
  or whose bit count is not 24 or 32.
- `colorcast.chart.pie_chart_svg` returns the SVG text without writing a
  file; `write_pie_chart` writes it and `open_in_browser` opens a file with a
  given browser.
- `colorcast.directory.list_directory` and the functions of
  `colorcast.exercises` (`bits_set`, `join_words`, `student_report`,
  `fibonacci`, `power`) return their results rather than printing them.

## Limitations

- Pixel bytes are read exactly as stored, starting at the header's data
  offset and spanning the declared image size. Compression, row padding and
  colour tables are not handled, and an image whose header gives an image
  size of zero yields no colours.
- Every pie slice covers a tenth of the circle, whatever the number of
  colours, so fewer than ten colours leave part of the chart empty.
- The colour server always opens the chart with `firefox`.