import pytest

from colorcast.exercises import (
    ADDRESSES,
    BITS_SAMPLE,
    GRADES,
    STUDENTS,
    Address,
    Grades,
    Student,
    bits_set,
    fibonacci,
    join_words,
    main,
    power,
    student_report,
)


def test_bits_sample_value_has_both_bits():
    assert bits_set(268439552) is True
    assert BITS_SAMPLE == 268439552


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, False),
        (1 << 28, False),
        (1 << 12, False),
        ((1 << 28) | (1 << 12), True),
        ((1 << 28) | (1 << 12) | 0xFF, True),
    ],
)
def test_bits_set_requires_both_bits(value, expected):
    assert bits_set(value) is expected


def test_join_words_keeps_both_parts():
    joined = join_words("Hello", "World !")
    assert joined.startswith("Hello")
    assert joined.endswith("World !")
    assert len(joined) == len("Hello") + len("World !") + 1
    assert joined[len("Hello")] == " "


def test_join_words_empty_second():
    assert join_words("Hello", "") == "Hello" + " "


def test_fibonacci_first_seven():
    assert fibonacci(7) == [0, 1, 1, 2, 3, 5, 8]


@pytest.mark.parametrize("n", [3, 10, 25])
def test_fibonacci_recurrence(n):
    numbers = fibonacci(n)
    assert len(numbers) == n
    assert numbers[:2] == [0, 1]
    for a, b, c in zip(numbers, numbers[1:], numbers[2:]):
        assert c == a + b


def test_fibonacci_prefix_property():
    assert fibonacci(12)[:5] == fibonacci(5)
    assert fibonacci(0) == []


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_power_source_example():
    assert power(2, 4) == 16


@pytest.mark.parametrize("base", [-3, 0, 2, 7])
@pytest.mark.parametrize("exponent", [0, 1, 4, 9])
def test_power_step(base, exponent):
    assert power(base, exponent + 1) == power(base, exponent) * base


def test_power_without_positive_exponent_is_one():
    assert power(5, 0) == 1
    assert power(5, -2) == 1


def test_student_records_line_up_by_id():
    ids = [student.student_id for student in STUDENTS]
    assert [address.student_id for address in ADDRESSES] == ids
    assert [grade.student_id for grade in GRADES] == ids
    assert STUDENTS[0] == Student("Dupont", "Alice", 1)
    assert ADDRESSES[2] == Address(3, 20, "Rue de la République", 69002, "Lyon")
    assert GRADES[4] == Grades(5, 14, 16)


def test_student_report_structure():
    report = student_report()
    blocks = report.split("\n\n")
    assert blocks[-1] == ""
    assert len(blocks) - 1 == len(STUDENTS)
    for block, student, address, grade in zip(blocks, STUDENTS, ADDRESSES, GRADES):
        lines = block.split("\n")
        assert len(lines) == 3
        assert lines[0].startswith(f"Etudiant {student.student_id} : ")
        assert student.first_name in lines[0] and student.last_name in lines[0]
        assert lines[1].startswith("Adresse : ")
        assert address.street in lines[1] and address.city in lines[1]
        assert str(address.postal_code) in lines[1]
        assert lines[2].startswith("Notes : Module 1 = ")
        assert lines[2].endswith(f"Module 2 = {grade.module2}")


def test_main_bits(capsys):
    assert main(["bits"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_puissance(capsys):
    assert main(["puissance"]) == 0
    assert capsys.readouterr().out.strip() == str(power(2, 4))


def test_main_fibonacci(capsys):
    assert main(["fibonacci"]) == 0
    printed = [int(word) for word in capsys.readouterr().out.split()]
    assert printed == fibonacci(7)


def test_main_chaine(capsys):
    assert main(["chaine"]) == 0
    assert capsys.readouterr().out == join_words("Hello", "World !") + "\n"


def test_main_etudiant(capsys):
    assert main(["etudiant"]) == 0
    assert capsys.readouterr().out == student_report()


def test_main_runs_all(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert student_report() in out
    assert out.startswith("1\n")


def test_main_rejects_unknown_exercise():
    with pytest.raises(SystemExit):
        main(["inconnu"])