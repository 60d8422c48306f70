import pytest

from gaussorm.dialects import OpenGaussDialect, quote_identifier


class Buffer:
    def __init__(self):
        self.parts = []

    def write(self, text):
        self.parts.append(text)

    @property
    def value(self):
        return "".join(self.parts)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("users", '"users"'),
        ('a"b', '"a""b"'),
        ("schema.table", '"schema"."table"'),
        ("public.users.id", '"public"."users"."id"'),
        ('a""b', '"a""b"'),
        ('"users"', '"users"'),
        ('"public"."users"', '"public"."users"'),
        ('"public".users', '"public"."users"'),
        ('"odd.name"', '"odd.name"'),
        ('name"', '"name"""'),
        ("", '""'),
        ("a..b", '"a".""."b"'),
        (".a", '""."a"'),
        ("a.", '"a".""'),
        ("weird name;--", '"weird name;--"'),
    ],
)
def test_quote_identifier(raw, expected):
    assert quote_identifier(raw) == expected


@pytest.mark.parametrize("raw", ["users", 'a"b', "schema.table", 'a""b', "x.y.z", 'we"ird.na""me'])
def test_quoting_a_quoted_identifier_is_stable(raw):
    once = quote_identifier(raw)
    assert quote_identifier(once) == once


def test_pre_doubled_quotes_are_not_doubled_again():
    quoted = quote_identifier('col""umn')
    assert quoted.count('"') == quote_identifier('col"umn').count('"')


def test_dialect_quote_to_writes_into_writer():
    buffer = Buffer()
    OpenGaussDialect().quote_to(buffer, "public.users")
    assert buffer.value == '"public"."users"'
