"""Tests for the semicolon-delimited quote CSV."""

from quotebook.storage.csv_store import (
    append_to_csv,
    init_csv,
    read_quotes_from_csv,
    sanitize_field,
)
from quotebook.validators.quotes import Quote

HEADER_LINE = "Цитата;Автор;Контекст (До);Контекст (После)"


class TestInitCsv:

    def test_bom_and_header(self, tmp_path):
        path = tmp_path / "book.csv"
        init_csv(path)

        raw = path.read_bytes()
        assert raw.startswith(b"\xef\xbb\xbf")
        assert raw.decode("utf-8-sig") == HEADER_LINE + "\n"

    def test_truncates_existing_file(self, tmp_path, sample_quotes):
        path = tmp_path / "book.csv"
        init_csv(path)
        append_to_csv(path, sample_quotes)

        init_csv(path)
        assert read_quotes_from_csv(path) == []

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "book.csv"
        init_csv(path)
        assert path.exists()


class TestSanitizeField:

    def test_semicolon_and_newline(self):
        assert sanitize_field("раз; два\nтри") == "раз, два три"

    def test_carriage_returns(self):
        assert sanitize_field("Булгаков\r\nМ.\rА.") == "Булгаков М. А."

    def test_none(self):
        assert sanitize_field(None) == ""


class TestAppendAndRead:

    def test_round_trip(self, tmp_path, sample_quotes):
        path = tmp_path / "book.csv"
        init_csv(path)
        assert append_to_csv(path, sample_quotes) == 2

        assert read_quotes_from_csv(path) == sample_quotes

    def test_round_trip_with_sanitization(self, tmp_path):
        path = tmp_path / "book.csv"
        init_csv(path)
        append_to_csv(path, [Quote("a;b", "Автор\nИмя", "до;\nдо", 'он сказал "нет"')])

        assert read_quotes_from_csv(path) == [
            Quote("a,b", "Автор Имя", "до, до", 'он сказал "нет"')
        ]

    def test_leading_spaces_preserved(self, tmp_path):
        path = tmp_path / "book.csv"
        quote = Quote(" рукописи не горят", " Булгаков", " Он сказал.", " Конец.")
        init_csv(path)
        append_to_csv(path, [quote])

        assert read_quotes_from_csv(path) == [quote]

    def test_one_record_per_line(self, tmp_path):
        path = tmp_path / "book.csv"
        init_csv(path)
        append_to_csv(path, [Quote("раз\nдва", "А", "x\ny", "z")])

        lines = path.read_text(encoding="utf-8-sig").splitlines()
        assert len(lines) == 2
        assert lines[1] == '"раз два";"А";"x y";"z"'

    def test_several_batches_single_bom(self, tmp_path, sample_quotes):
        path = tmp_path / "book.csv"
        init_csv(path)
        append_to_csv(path, sample_quotes[:1])
        append_to_csv(path, sample_quotes[1:])

        assert path.read_text(encoding="utf-8").count("\ufeff") == 1
        assert read_quotes_from_csv(path) == sample_quotes

    def test_empty_batch(self, tmp_path):
        path = tmp_path / "book.csv"
        init_csv(path)
        assert append_to_csv(path, []) == 0
        assert read_quotes_from_csv(path) == []


class TestReadQuotes:

    def test_malformed_rows_skipped(self, tmp_path, capsys):
        path = tmp_path / "quotes.csv"
        path.write_text(
            HEADER_LINE + "\n"
            "раз;А;до;после\n"
            "кривая;строка\n"
            "два;Б;;\n",
            encoding="utf-8-sig",
        )

        quotes = read_quotes_from_csv(path)

        assert quotes == [Quote("раз", "А", "до", "после"), Quote("два", "Б", "", "")]
        assert "line 3" in capsys.readouterr().err

    def test_leading_spaces_ignored(self, tmp_path):
        path = tmp_path / "quotes.csv"
        path.write_text(HEADER_LINE + "\nраз; А; до; после\n", encoding="utf-8")

        assert read_quotes_from_csv(path) == [Quote("раз", "А", "до", "после")]

    def test_extra_fields_ignored(self, tmp_path):
        path = tmp_path / "quotes.csv"
        path.write_text(HEADER_LINE + "\nраз;А;до;после;лишнее\n", encoding="utf-8")

        assert read_quotes_from_csv(path) == [Quote("раз", "А", "до", "после")]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_bytes(b"")
        assert read_quotes_from_csv(path) == []

    def test_blank_lines_skipped(self, tmp_path, capsys):
        path = tmp_path / "quotes.csv"
        path.write_text(HEADER_LINE + "\n\nраз;А;до;после\n\n", encoding="utf-8")

        assert read_quotes_from_csv(path) == [Quote("раз", "А", "до", "после")]
        assert capsys.readouterr().err == ""
