"""Tests for the subject, body, type, scope and description rules."""
import pytest
from pydantic import ValidationError

from gitcommitlint.models import CommitType, Level
from gitcommitlint.parser import parse_message
from gitcommitlint.rules import (
    RULE_REGISTRY,
    Rule,
    BodyEmpty,
    BodyLeadingBlank,
    BodyMaxLineLength,
    DescriptionEmpty,
    ScopeEmpty,
    SubjectEmpty,
    SubjectFullStop,
    SubjectMaxLength,
    TicketId,
    TypeAllowed,
    TypeEmpty,
)


def test_registry_order_and_names():
    assert list(RULE_REGISTRY) == [
        "subject-empty",
        "subject-max-length",
        "subject-full-stop",
        "type-empty",
        "type",
        "scope-empty",
        "description-empty",
        "body-empty",
        "body-leading-blank",
        "body-max-line-length",
        "ticket-id",
    ]
    assert RULE_REGISTRY["ticket-id"] is TicketId


def test_subject_empty(make_message):
    rule = SubjectEmpty()
    assert rule.validate(make_message(subject="feat: add feature")) is None

    violation = rule.validate(make_message(body="only a body"))
    assert violation.level == Level.ERROR
    assert violation.message == "Subject is empty"

    assert rule.validate(make_message(subject="   ", body="x")) is not None


def test_subject_max_length(make_message):
    rule = SubjectMaxLength(length=10)

    assert rule.validate(make_message(subject="1234567890")) is None

    violation = rule.validate(make_message(subject="This is way too long"))
    assert violation is not None
    assert "Subject line too long (20 > 10)" in violation.message

    assert rule.validate(make_message(body="no subject")) is None


def test_subject_max_length_default():
    assert SubjectMaxLength().length == 72


def test_body_empty(make_message):
    rule = BodyEmpty()
    assert rule.validate(make_message(subject="feat: x", body="Explains why")) is None

    violation = rule.validate(make_message(subject="feat: x"))
    assert violation.level == Level.WARNING
    assert violation.message == "Body is empty"


def test_body_max_line_length(make_message):
    rule = BodyMaxLineLength(length=10)

    assert rule.validate(make_message(subject="feat: add", body="Short\nAlso short")) is None
    assert rule.validate(make_message(subject="feat: add")) is None

    violation = rule.validate(make_message(subject="feat: add", body="Short\nThis line is way too long"))
    assert violation is not None
    assert violation.message == "Body line 2 too long (25 > 10)"


def test_body_max_line_length_merges_offenders(make_message):
    rule = BodyMaxLineLength(length=5)
    violation = rule.validate(make_message(subject="feat: add", body="toolong\nok\nalso too long\nlonger still"))
    assert violation.message == "Body line 1 too long (7 > 5) and 2 more"


def test_type_empty(make_message):
    rule = TypeEmpty()
    assert rule.validate(make_message(subject="feat: add", type="feat")) is None

    violation = rule.validate(make_message(subject="add feature"))
    assert violation.level == Level.ERROR
    assert "must follow format" in violation.message


def test_type_allowed(make_message):
    rule = TypeAllowed()
    assert rule.values == [t.value for t in CommitType]
    assert rule.validate(make_message(subject="feat: add", type="feat")) is None

    violation = rule.validate(make_message(subject="feature: add", type="feature"))
    assert violation is not None
    assert "Type 'feature' is not allowed" in violation.message


def test_type_allowed_skips_missing_type(make_message):
    assert TypeAllowed().validate(make_message(subject="add feature")) is None


def test_type_allowed_custom_values(make_message):
    rule = TypeAllowed(values=["hotfix"])
    assert rule.validate(make_message(subject="hotfix: x", type="hotfix")) is None
    assert rule.validate(make_message(subject="feat: x", type="feat")) is not None


def test_scope_empty(make_message):
    rule = ScopeEmpty()
    assert rule.validate(make_message(subject="feat(api): x", scope="api")) is None

    violation = rule.validate(make_message(subject="feat: x"))
    assert violation.level == Level.WARNING
    assert violation.rule == "scope-empty"


def test_description_empty(make_message):
    rule = DescriptionEmpty()
    assert rule.validate(make_message(subject="feat: x", description="x")) is None
    assert rule.validate(make_message(subject="feat: ", description=None)).level == Level.WARNING


def test_level_override_applies_to_every_rule(make_message):
    message = make_message(body="a body line that is definitely longer than five")
    for rule_class in (SubjectEmpty, TypeEmpty, ScopeEmpty, DescriptionEmpty):
        violation = rule_class(level=Level.WARNING).validate(message)
        assert violation.level == Level.WARNING
    assert BodyMaxLineLength(length=5, level=Level.WARNING).validate(message).level == Level.WARNING


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        SubjectMaxLength(max=10)


@pytest.mark.parametrize("rule_class", list(RULE_REGISTRY.values()))
def test_every_rule_has_generic_message(make_message, rule_class):
    message = make_message(subject="feat: x")
    assert isinstance(rule_class().message(message), str)
    assert rule_class().message(message)


def test_subject_full_stop(make_message):
    rule = SubjectFullStop()
    assert rule.validate(make_message(subject="feat: add feature")) is None
    assert rule.validate(make_message(body="no subject")) is None

    violation = rule.validate(make_message(subject="feat: add feature."))
    assert violation.level == Level.ERROR
    assert "should not end with a period" in violation.message


def test_body_leading_blank():
    rule = BodyLeadingBlank()
    assert rule.validate(parse_message("feat: add feature\n\nWith blank line")) is None
    assert rule.validate(parse_message("feat: add feature")) is None

    violation = rule.validate(parse_message("feat: add feature\nNo blank line"))
    assert violation.level == Level.WARNING
    assert "blank line after subject" in violation.message


@pytest.mark.parametrize("rule_class", list(RULE_REGISTRY.values()))
def test_every_rule_is_documented(rule_class):
    assert rule_class.__doc__
    assert rule_class.__doc__ != Rule.__doc__
