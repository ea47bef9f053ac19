import pytest

from netvent import (
    EmptyInputError,
    Kind,
    LimitError,
    MalformedStructureError,
    MissingSeparatorError,
    ParseError,
    Table,
    UnknownFormError,
    Value,
    parse_table,
    parse_value,
)
from netvent._parser import split_top_level
from netvent._value import to_single


class TestNumberParsing:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("42", 42),
            ("-42", -42),
            ("0", 0),
            ("-0", 0),
            ("007", 7),
            ("2147483647", 2147483647),
            ("-2147483648", -2147483648),
            ("0" * 5000 + "42", 42),
            ("-" + "0" * 5000, 0),
        ],
        ids=[
            "int",
            "negative",
            "zero",
            "negative_zero",
            "leading_zeros",
            "max",
            "min",
            "many_leading_zeros",
            "many_zeros_negative",
        ],
    )
    def test_ints(self, text: str, expected: int) -> None:
        value = Value.deserialize(text)
        assert value.is_int()
        assert value.as_int() == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("42.0", 42.0),
            ("-42.5", -42.5),
            ("1.5", 1.5),
            ("0.1", to_single(0.1)),
            ("3.14159", to_single(3.14159)),
        ],
        ids=["whole", "negative", "exact", "tenth", "more_precision"],
    )
    def test_floats(self, text: str, expected: float) -> None:
        value = Value.deserialize(text)
        assert value.is_float()
        assert value.as_float() == expected

    @pytest.mark.parametrize(
        "text",
        [
            "2147483648",
            "-2147483649",
            "1" + "0" * 40 + ".0",
            "1" + "0" * 400 + ".0",
            "1" * 5000,
            "-" + "9" * 5000,
            "1" * 5000 + ".5",
        ],
        ids=[
            "int_above_max",
            "int_below_min",
            "float_overflow",
            "float_infinite",
            "thousands_of_digits",
            "thousands_of_digits_negative",
            "thousands_of_digits_float",
        ],
    )
    def test_out_of_range_falls_back_to_string(self, text: str) -> None:
        value = Value.deserialize(text)
        assert value.is_string()
        assert value.as_string() == text

    @pytest.mark.parametrize(
        "text",
        ["1.2.3", "1.", ".5", "+5", "1e5", "--1", "-", "12abc", " 42", "42 "],
        ids=[
            "two_points",
            "no_fraction",
            "no_whole",
            "plus_sign",
            "exponent",
            "double_minus",
            "lone_minus",
            "trailing_letters",
            "leading_space",
            "trailing_space",
        ],
    )
    def test_non_numbers_become_strings(self, text: str) -> None:
        value = Value.deserialize(text)
        assert value.kind is Kind.STRING
        assert value.as_string() == text


class TestLiteralParsing:
    def test_true(self) -> None:
        assert Value.deserialize("true") == Value(True)

    def test_false(self) -> None:
        assert Value.deserialize("false") == Value(False)

    @pytest.mark.parametrize("text", ["True", "FALSE", "yes"], ids=["title", "upper", "yes"])
    def test_literals_are_case_sensitive(self, text: str) -> None:
        assert Value.deserialize(text) == Value(text)


class TestStringParsing:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('"hello"', "hello"),
            ('""', ""),
            ('"this person"', "this person"),
            ('"42"', "42"),
            ('"true"', "true"),
            ('"[1,2]"', "[1,2]"),
            ('"say "hi""', 'say "hi"'),
        ],
        ids=[
            "word",
            "empty",
            "with_space",
            "number_text",
            "literal_text",
            "bracket_text",
            "inner_quotes_verbatim",
        ],
    )
    def test_quoted(self, text: str, expected: str) -> None:
        value = Value.deserialize(text)
        assert value.is_string()
        assert value.as_string() == expected

    @pytest.mark.parametrize(
        "text",
        ["shoot", "new_player", "hello world", '"', '"open', 'close"', "]"],
        ids=[
            "identifier",
            "identifier_underscore",
            "words",
            "lone_quote",
            "unclosed_quote",
            "unopened_quote",
            "lone_closer",
        ],
    )
    def test_unquoted_fallback(self, text: str) -> None:
        assert Value.deserialize(text) == Value(text)


class TestTableParsing:
    def test_simple_array(self) -> None:
        table = Table.deserialize("[1,2,3]")
        assert table.is_array
        assert table.get_data() == [Value(1), Value(2), Value(3)]

    def test_value_dispatches_to_table(self) -> None:
        value = Value.deserialize("[1,2,3]")
        assert value.is_table()
        assert value.as_table().get_is_array()

    @pytest.mark.parametrize(
        ("text", "is_array"),
        [("[]", True), ("{}", False), ("[ ]", True), ("{ }", False), ("[,]", True)],
        ids=["array", "map", "array_space", "map_space", "array_lone_comma"],
    )
    def test_empty_tables(self, text: str, is_array: bool) -> None:
        table = Table.deserialize(text)
        assert table.get_is_array() is is_array
        assert len(table) == 0

    def test_map(self) -> None:
        table = Table.deserialize('{"x"=10,"y"=20}')
        assert not table.is_array
        assert table["x"].as_int() == 10
        assert table["y"].as_int() == 20

    @pytest.mark.parametrize(
        "text", ["[1,2,3,]", "[1, 2, 3,]", "[ 1 ,2 , 3 , ]"], ids=["tight", "spaced", "padded"]
    )
    def test_array_trailing_comma(self, text: str) -> None:
        table = Table.deserialize(text)
        assert table.get_data() == [Value(1), Value(2), Value(3)]

    def test_object_trailing_comma(self) -> None:
        table = Table.deserialize('{"x"=10,"y"=20,}')
        assert not table.is_array
        assert table["x"].as_int() == 10
        assert table["y"].as_int() == 20

    def test_nested_trailing_commas(self) -> None:
        table = Table.deserialize('[{"a"=1,},{"b"=2,},]')
        data = table.get_data()
        assert isinstance(data, list)
        assert len(data) == 2
        assert data[0].as_table()["a"].as_int() == 1
        assert data[1].as_table()["b"].as_int() == 2

    def test_whitespace_around_separators(self) -> None:
        table = Table.deserialize('{ "x" = 1 , "y" = 2 }')
        assert table.keys() == [Value("x"), Value("y")]

    def test_multiline(self) -> None:
        table = Table.deserialize("[\n  1,\n  2\n]")
        assert table.get_data() == [Value(1), Value(2)]

    def test_nested_commas_not_split(self) -> None:
        table = Table.deserialize("[[1,2],[3,4]]")
        data = table.get_data()
        assert isinstance(data, list)
        assert len(data) == 2
        assert data[1].as_table().get_data() == [Value(3), Value(4)]

    def test_nested_map_value(self) -> None:
        table = Table.deserialize('{"a"={"b"=1,"c"=2}}')
        inner = table["a"].as_table()
        assert inner.keys() == [Value("b"), Value("c")]

    def test_non_string_keys(self) -> None:
        table = Table.deserialize('{1="one",true="yes",2.5="half"}')
        assert table[1].as_string() == "one"
        assert table[True].as_string() == "yes"
        assert table[2.5].as_string() == "half"

    def test_repeated_key_keeps_last(self) -> None:
        table = Table.deserialize('{"x"=1,"x"=2}')
        assert len(table) == 1
        assert table["x"].as_int() == 2

    @pytest.mark.parametrize(
        "text", ['{"x"=,"y"=2}', '{=1,"y"=2}', '{ = ,"y"=2}'], ids=["no_value", "no_key", "neither"]
    )
    def test_entries_with_empty_side_dropped(self, text: str) -> None:
        table = Table.deserialize(text)
        assert table.keys() == [Value("y")]

    def test_first_equals_splits_pair(self) -> None:
        table = Table.deserialize('{"a"="b=c"}')
        assert table["a"].as_string() == "b=c"

    def test_unquoted_elements(self) -> None:
        table = Table.deserialize("[alpha, beta]")
        assert table.get_data() == [Value("alpha"), Value("beta")]

    def test_bracket_kinds_share_one_depth_counter(self) -> None:
        table = Table.deserialize('["[}",1]')
        assert table.get_data() == [Value("[}"), Value(1)]

    def test_comma_inside_string_splits(self) -> None:
        table = Table.deserialize('["a,b"]')
        assert table.get_data() == [Value('"a'), Value('b"')]

    def test_array_of_objects(self) -> None:
        text = (
            '[{"height"=50,"width"=100,"x"=10,"y"=20},'
            '{"height"=75,"width"=200,"x"=30,"y"=40}]'
        )
        data = Table.deserialize(text).get_data()
        assert isinstance(data, list)
        assert len(data) == 2
        first = data[0].as_table()
        second = data[1].as_table()
        assert [first[k].as_int() for k in ("x", "y", "width", "height")] == [10, 20, 100, 50]
        assert [second[k].as_int() for k in ("x", "y", "width", "height")] == [30, 40, 200, 75]

    def test_deeply_nested(self) -> None:
        text = (
            '[{"data"=42,"nested"=[{"eyes_bleeding"=true},{"eyes_bleeding"=true}]},'
            '{"data"=42,"nested"=[{"eyes_bleeding"=true},{"eyes_bleeding"=true}]}]'
        )
        outer = Table.deserialize(text).get_data()
        assert isinstance(outer, list)
        assert len(outer) == 2
        for element in outer:
            middle = element.as_table()
            assert not middle.is_array
            assert middle["data"].as_int() == 42
            inner = middle["nested"].as_table()
            assert inner.is_array
            for item in inner.values():
                assert item.as_table()["eyes_bleeding"].as_bool() is True

    def test_parse_functions_match_methods(self) -> None:
        assert parse_value("7") == Value(7)
        assert parse_table("[7]").get_data() == [Value(7)]


class TestParseErrors:
    def test_empty_value(self) -> None:
        with pytest.raises(EmptyInputError, match="empty input"):
            _ = Value.deserialize("")

    def test_empty_table(self) -> None:
        with pytest.raises(EmptyInputError, match="empty input"):
            _ = Table.deserialize("")

    @pytest.mark.parametrize(
        "text",
        ["[", "{", "[1,2", '{"a"=1', "[1,2}", '{"a"=1]', "[[1]", "[1]]", "[{]"],
        ids=[
            "lone_bracket",
            "lone_brace",
            "unclosed_array",
            "unclosed_object",
            "array_closed_by_brace",
            "object_closed_by_bracket",
            "inner_unclosed",
            "extra_closer",
            "inner_unbalanced",
        ],
    )
    def test_malformed_structure(self, text: str) -> None:
        with pytest.raises(MalformedStructureError):
            _ = Value.deserialize(text)

    def test_nested_malformed_structure(self) -> None:
        with pytest.raises(MalformedStructureError, match="missing closing"):
            _ = Table.deserialize("[[1},2]")

    @pytest.mark.parametrize(
        "text", ['{"a"}', '{"a"=1,"b"}', '[{"a"}]', "{1 2}"], ids=["only", "second", "nested", "space"]
    )
    def test_missing_separator(self, text: str) -> None:
        with pytest.raises(MissingSeparatorError, match="missing '='"):
            _ = Value.deserialize(text)

    @pytest.mark.parametrize("text", ["42", "abc", '"[1]"'], ids=["number", "word", "string"])
    def test_table_from_non_table(self, text: str) -> None:
        with pytest.raises(UnknownFormError, match="expected '\\[' or '\\{'"):
            _ = Table.deserialize(text)

    @pytest.mark.parametrize(
        "error",
        [EmptyInputError, MalformedStructureError, MissingSeparatorError, UnknownFormError],
        ids=["empty", "malformed", "separator", "unknown"],
    )
    def test_errors_are_parse_errors(self, error: type[Exception]) -> None:
        assert issubclass(error, ParseError)


class TestNestingLimit:
    def test_accepts_default_depth(self) -> None:
        text = "[" * 64 + "]" * 64
        assert Value.deserialize(text).is_table()

    def test_rejects_beyond_default_depth(self) -> None:
        text = "[" * 65 + "]" * 65
        with pytest.raises(LimitError, match="nesting depth 65 exceeds maximum 64"):
            _ = Value.deserialize(text)

    def test_custom_max_depth(self) -> None:
        text = '{"a"=[1]}'
        assert Table.deserialize(text, max_depth=2)["a"].as_table().is_array
        with pytest.raises(LimitError, match="nesting depth 2 exceeds maximum 1"):
            _ = Table.deserialize(text, max_depth=1)

    def test_scalars_have_no_depth(self) -> None:
        assert Value.deserialize("5", max_depth=0) == Value(5)

    def test_no_limit(self) -> None:
        text = "[" * 100 + "]" * 100
        assert Value.deserialize(text, max_depth=None).is_table()

    def test_recursion_error_becomes_limit_error(self) -> None:
        text = "[" * 2000 + "]" * 2000
        with pytest.raises(LimitError, match="nesting depth exceeds maximum"):
            _ = Value.deserialize(text, max_depth=None)


class TestSplitTopLevel:
    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("1,2,3", ["1", "2", "3"]),
            ("[1,2],3", ["[1,2]", "3"]),
            ("{a=1,b=2},{c=3}", ["{a=1,b=2}", "{c=3}"]),
            ("1,,2", ["1", "2"]),
            (" 1 , 2 ,", ["1", "2"]),
            ("", []),
            ("[}", ["[}"]),
        ],
        ids=[
            "flat",
            "nested_array",
            "nested_objects",
            "empty_segment",
            "padded_trailing",
            "empty",
            "mixed_bracket_kinds",
        ],
    )
    def test_split(self, content: str, expected: list[str]) -> None:
        assert split_top_level(content) == expected

    @pytest.mark.parametrize("content", ["[1", "1]", "{[}"], ids=["open", "close", "extra_open"])
    def test_unbalanced(self, content: str) -> None:
        with pytest.raises(MalformedStructureError, match="unbalanced brackets"):
            _ = split_top_level(content)
