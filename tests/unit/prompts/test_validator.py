"""Tests for path validators and the fail-fast chain."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazyinquire.errors import ValidationError
from lazyinquire.validator import (
    CallableValidator,
    DirectoryValidator,
    ExistsValidator,
    ExtensionValidator,
    FileValidator,
    PathValidator,
    as_path_validator,
    run_validators,
)


class _CountingValidator(PathValidator):
    def __init__(self, message: str | None) -> None:
        self.message = message
        self.calls = 0

    def validate(self, path: Path) -> None:
        self.calls += 1
        if self.message:
            raise ValidationError(self.message)


class ValidatorChainTests(unittest.TestCase):
    def test_empty_chain_accepts(self) -> None:
        self.assertIsNone(run_validators((), Path("/anything")))

    def test_chain_stops_at_first_failure(self) -> None:
        first = _CountingValidator("first failed")
        second = _CountingValidator("second failed")

        self.assertEqual(run_validators((first, second), Path("/x")), "first failed")
        self.assertEqual((first.calls, second.calls), (1, 0))

    def test_chain_runs_in_order_until_failure(self) -> None:
        ok = _CountingValidator(None)
        failing = _CountingValidator("nope")
        never = _CountingValidator("unreachable")

        self.assertEqual(run_validators((ok, failing, never), Path("/x")), "nope")
        self.assertEqual((ok.calls, failing.calls, never.calls), (1, 1, 0))

    def test_non_validation_errors_propagate(self) -> None:
        def broken(path: Path) -> str | None:
            raise KeyError("bug")

        with self.assertRaises(KeyError):
            run_validators((as_path_validator(broken),), Path("/x"))


class CallableAdapterTests(unittest.TestCase):
    def test_callables_accept_with_none_or_empty_string(self) -> None:
        self.assertIsNone(run_validators((as_path_validator(lambda p: None),), Path("/x")))
        self.assertIsNone(run_validators((as_path_validator(lambda p: ""),), Path("/x")))
        self.assertEqual(run_validators((as_path_validator(lambda p: "bad"),), Path("/x")), "bad")

    def test_adapter_keeps_path_validators_and_rejects_non_callables(self) -> None:
        validator = ExistsValidator()
        self.assertIs(as_path_validator(validator), validator)
        self.assertIsInstance(as_path_validator(lambda p: None), CallableValidator)
        with self.assertRaises(TypeError):
            as_path_validator("not callable")


class BuiltinValidatorTests(unittest.TestCase):
    def test_extension_validator_is_case_insensitive_by_default(self) -> None:
        validator = ExtensionValidator("txt", ".tar.gz")
        validator.validate(Path("/a/NOTES.TXT"))
        validator.validate(Path("/a/archive.tar.gz"))
        with self.assertRaisesRegex(ValidationError, r"must end with \.txt or \.tar\.gz"):
            validator.validate(Path("/a/readme.md"))

    def test_extension_validator_case_sensitive(self) -> None:
        validator = ExtensionValidator(".txt", case_sensitive=True)
        with self.assertRaises(ValidationError):
            validator.validate(Path("/a/NOTES.TXT"))

    def test_kind_validators(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            file_path = root / "a.txt"
            file_path.write_text("a", encoding="utf-8")

            FileValidator().validate(file_path)
            DirectoryValidator().validate(root)
            ExistsValidator().validate(file_path)
            with self.assertRaises(ValidationError):
                FileValidator().validate(root)
            with self.assertRaises(ValidationError):
                DirectoryValidator().validate(file_path)
            with self.assertRaises(ValidationError):
                ExistsValidator().validate(root / "missing")


if __name__ == "__main__":
    unittest.main()
