import pytest
from sexpc.lexer import tokenize, UnknownCharacter, UnterminatedString, LexError
from sexpc.token import ParenOpen, ParenClose, Number, Name, String


def test_paren_open():
    assert tokenize("(") == [ParenOpen()]


def test_paren_open_trailing_space():
    assert tokenize("( ") == [ParenOpen()]


def test_paren_close():
    assert tokenize(")") == [ParenClose()]


def test_number():
    assert tokenize("1337") == [Number("1337")]


def test_number_keeps_leading_zeros():
    assert tokenize("007") == [Number("007")]


def test_name():
    assert tokenize("add") == [Name("add")]


def test_string():
    assert tokenize('"mrmarble"') == [String("mrmarble")]


def test_string_keeps_spaces_and_punctuation():
    assert tokenize('"hello, World!"') == [String("hello, World!")]


def test_empty_string():
    assert tokenize('""') == [String("")]


def test_empty_source():
    assert tokenize("") == []
    assert tokenize(" \t\n ") == []


def test_nested_call():
    assert tokenize("(add 2 (subtract 1 4))") == [
        ParenOpen(),
        Name("add"),
        Number("2"),
        ParenOpen(),
        Name("subtract"),
        Number("1"),
        Number("4"),
        ParenClose(),
        ParenClose(),
    ]


def test_digit_ends_name():
    assert tokenize("add2") == [Name("add"), Number("2")]


def test_letter_ends_number():
    assert tokenize("12ab") == [Number("12"), Name("ab")]


def test_string_ends_name():
    assert tokenize('a"b"c') == [Name("a"), String("b"), Name("c")]


def test_unicode_whitespace_skipped():
    assert tokenize("(\u00a0add\u2003)") == [ParenOpen(), Name("add"), ParenClose()]


def test_unterminated_string_is_permissive():
    assert tokenize('"abc') == [String("abc")]
    assert tokenize('(print "abc') == [ParenOpen(), Name("print"), String("abc")]


def test_unterminated_string_strict():
    with pytest.raises(UnterminatedString, match="position 7") as ei:
        tokenize('(print "abc', strict_strings=True)
    assert ei.value.position == 7


def test_terminated_string_strict():
    assert tokenize('"abc"', strict_strings=True) == [String("abc")]


def test_unknown_character():
    with pytest.raises(UnknownCharacter) as ei:
        tokenize("!")
    assert ei.value.char == "!"
    assert ei.value.position == 0


@pytest.mark.parametrize("src,char,position", [
    ("(Add)", "A", 1),
    ("(add -1)", "-", 5),
    ("(add 1.5)", ".", 6),
    ("(my_fn)", "_", 3),
    ("(add) ; note", ";", 6),
])
def test_rejected_characters(src, char, position):
    with pytest.raises(UnknownCharacter, match="unknown character") as ei:
        tokenize(src)
    assert (ei.value.char, ei.value.position) == (char, position)


def test_lex_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        tokenize("#")
    assert issubclass(UnknownCharacter, LexError)
    assert issubclass(UnterminatedString, LexError)


def test_characters_inside_string_not_checked():
    assert tokenize('"#!_A"') == [String("#!_A")]


@pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_not_whitespace(sep):
    with pytest.raises(UnknownCharacter) as ei:
        tokenize("(a" + sep + ")")
    assert (ei.value.char, ei.value.position) == (sep, 2)


@pytest.mark.parametrize("ws", ["\t", "\n", "\v", "\f", "\r", "\x85", "\u00a0", "\u3000"])
def test_unicode_white_space_skipped(ws):
    assert tokenize("(a" + ws + ")") == [ParenOpen(), Name("a"), ParenClose()]
