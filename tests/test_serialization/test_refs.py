"""Tests for MemberRef and the JSON helpers."""

import json

import pytest
from pydantic import ValidationError

from families import Color, Direction, Severity
from tsenum import MemberRef, dumps, loads, UnknownFamilyError, UnknownLabelError


class TestMemberRef:
    """Tests for the (family tag, label) wire form."""

    def test_of_member(self):
        """Reference carries family tag and label."""
        ref = MemberRef.of(Color.GREEN)
        assert ref.family == "families.Color"
        assert ref.label == "green"

    def test_explicit_tag_used(self):
        """Families with an explicit tag use it on the wire."""
        assert MemberRef.of(Severity.LOW).family == "tests.severity"

    def test_resolve(self):
        """Resolving yields the registered member."""
        ref = MemberRef(family="families.Direction", label="E")
        assert ref.resolve() is Direction.EAST

    def test_frozen(self):
        """References are immutable."""
        ref = MemberRef.of(Color.RED)
        with pytest.raises(ValidationError):
            ref.label = "blue"

    def test_empty_label_rejected(self):
        """Empty labels fail validation."""
        with pytest.raises(ValidationError):
            MemberRef(family="families.Color", label="")

    def test_unknown_family(self):
        """Unknown tags fail on resolve."""
        ref = MemberRef(family="families.Nope", label="red")
        with pytest.raises(UnknownFamilyError):
            ref.resolve()

    def test_unknown_label(self):
        """Unknown labels fail on resolve."""
        ref = MemberRef(family="families.Color", label="purple")
        with pytest.raises(UnknownLabelError) as exc:
            ref.resolve()
        assert str(exc.value) == "Value 'purple' is not a valid Color enumeration value."


class TestJsonHelpers:
    """Tests for dumps/loads."""

    def test_dumps_shape(self):
        """dumps() writes the reference as JSON."""
        data = json.loads(dumps(Color.BLUE))
        assert data == {"family": "families.Color", "label": "blue"}

    def test_round_trip_identity(self):
        """loads(dumps(m)) is m."""
        for member in [*Color, *Direction, *Severity]:
            assert loads(dumps(member)) is member

    def test_loads_bytes(self):
        """loads() accepts bytes."""
        assert loads(b'{"family": "tests.severity", "label": "high"}') is Severity.HIGH

    def test_loads_malformed(self):
        """Malformed payloads fail validation."""
        with pytest.raises(ValidationError):
            loads('{"label": "red"}')
