import pytest

from rdpcalc.tokens import CalculatorError, Kind, Token, TokenStream, narrow_int


def read_all(text):
    stream = TokenStream(text)
    tokens = []
    while True:
        token = stream.get()
        tokens.append(token)
        if token.kind == Kind.PRINT:
            return tokens


def test_kind_codes_fixed_by_source():
    kinds = [t.kind for t in read_all("let x 8;")]
    assert kinds == ["L", "a", "8", ";"]


def test_declaration_tokens():
    assert read_all("let x = 3.5;") == [
        Token(Kind.LET),
        Token(Kind.NAME, name="x"),
        Token("="),
        Token(Kind.NUMBER, 3.5),
        Token(Kind.PRINT),
    ]


def test_symbols_are_their_own_kind():
    kinds = [t.kind for t in read_all("(){}!+-*/%=,~&|^;")]
    assert kinds[:-1] == list("(){}!+-*/%=,~&|^")


@pytest.mark.parametrize(
    "word, kind",
    [("let", Kind.LET), ("sqrt", Kind.SQRT), ("pow", Kind.POW),
     ("sin", Kind.SIN), ("cos", Kind.COS), ("help", Kind.HELP)],
)
def test_keywords(word, kind):
    assert TokenStream(word + "(").get() == Token(kind)


def test_q_starts_quit():
    stream = TokenStream("quit")
    assert stream.get().kind == Kind.QUIT


def test_name_with_digits_and_underscore():
    assert TokenStream("a_1b2+").get() == Token(Kind.NAME, name="a_1b2")


def test_newline_is_print():
    stream = TokenStream("  \n")
    assert stream.get().kind == Kind.PRINT


def test_leading_dot_number():
    assert TokenStream(".5;").get() == Token(Kind.NUMBER, 0.5)


def test_bad_token():
    with pytest.raises(CalculatorError, match="Bad token--"):
        TokenStream("$").get()


def test_lone_dot_is_bad():
    with pytest.raises(CalculatorError):
        TokenStream(".;").get()


def test_putback_returns_same_token():
    stream = TokenStream("12 + 3;")
    first = stream.get()
    stream.putback(first)
    assert stream.get() == first
    assert stream.get().kind == "+"


def test_ignore_discards_through_character():
    stream = TokenStream("1 2 ; 7;")
    stream.ignore(";")
    assert stream.get() == Token(Kind.NUMBER, 7.0)


def test_ignore_matching_buffer_only_clears_buffer():
    stream = TokenStream("1 2;")
    stream.putback(stream.get())
    stream.ignore(Kind.NUMBER)
    assert stream.get() == Token(Kind.NUMBER, 2.0)


def test_next_char_and_unread_round_trip():
    stream = TokenStream("ab")
    assert stream.next_char() == "a"
    stream.unread_char()
    assert stream.next_char() == "a"
    assert stream.next_char() == "b"
    assert stream.next_char() == ""


def test_narrow_int_accepts_whole_value():
    assert narrow_int(3.0) == 3


@pytest.mark.parametrize("value", [3.5, float("inf"), float("nan"), 1e12])
def test_narrow_int_rejects_loss(value):
    with pytest.raises(CalculatorError, match="info loss"):
        narrow_int(value)