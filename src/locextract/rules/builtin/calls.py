"""Malformed localization call rules."""

from locextract.rules.models import LintRule

CONCATENATION_MESSAGE = (
    "Warning: string concatenation is not allowed in the NSLocalizedString() parameters:"
)
NON_LITERAL_MESSAGE = (
    "Warning: non-string arguments are not allowed in the NSLocalizedString() parameters:"
)

CONCATENATION_BEFORE_COMMA = LintRule(
    id="CONCATENATION_BEFORE_COMMA",
    name="Concatenated Source String",
    description="The source literal is followed by a '+' before the comma.",
    message=CONCATENATION_MESSAGE,
    pattern=r'{call}\s*\(\s*@"(\\"|[^"])*"\s*\+',
)

CONCATENATION_IN_ARGUMENTS = LintRule(
    id="CONCATENATION_IN_ARGUMENTS",
    name="Concatenation In Arguments",
    description="A '+' joins a quoted literal anywhere inside the argument list.",
    message=CONCATENATION_MESSAGE,
    pattern=r'{call}\s*\([^\)]*\+\s*@"(\\"|[^"])*"',
)

NON_LITERAL_ARGUMENT = LintRule(
    id="NON_LITERAL_ARGUMENT",
    name="Non-literal Source Argument",
    description="The first argument is not a quoted string literal.",
    message=NON_LITERAL_MESSAGE,
    pattern=r'{call}\s*\((?!\s*@?")[^",\)]*[,\)]',
)

ALL_CALL_RULES = [
    CONCATENATION_BEFORE_COMMA,
    CONCATENATION_IN_ARGUMENTS,
    NON_LITERAL_ARGUMENT,
]
