"""
CLI Unit Tests
Tests for binmerkle_cli/main.py and the command modules.
"""
import json

import pytest

from binmerkle.crypto.hashing import hash_leaf, hash_node
from binmerkle.merkle.merkle_tree import build_merkle_tree
from binmerkle.schemas.errors import ErrorCodes
from binmerkle_cli.main import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    create_parser,
    main,
)


LITERAL_ROOT = hash_node(
    hash_node(hash_leaf("some"), hash_leaf("test")),
    hash_node(hash_leaf("elements"), hash_leaf("")),
)


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    """Run every CLI test away from any real config file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("BINMERKLE_LOG_LEVEL", "BINMERKLE_LOG_FILE",
                 "BINMERKLE_TRACE_CONSTRUCTION", "BINMERKLE_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def _write_proof(capsys, tmp_path, *argv) -> str:
    assert main(["prove", *argv]) == EXIT_SUCCESS
    path = tmp_path / "proof.json"
    path.write_text(capsys.readouterr().out)
    return str(path)


class TestParser:
    """Tests for argument parsing."""

    def test_no_command_returns_error(self, capsys):
        assert main([]) == EXIT_RUNTIME_ERROR

    def test_prove_requires_index(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["prove", "a", "b"])


class TestRootCommand:
    """Tests for `binmerkle root`."""

    def test_prints_root(self, capsys):
        assert main(["root", "some", "test", "elements"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == LITERAL_ROOT

    def test_json_summary(self, capsys):
        assert main(["root", "--json", "--check", "some", "test", "elements"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)

        assert data == {
            "root": LITERAL_ROOT,
            "size": 3,
            "leaf_count": 4,
            "height": 2,
            "integrity_ok": True,
        }

    def test_lone_surrogate_element(self, capsys):
        assert main(["root", "\udcff"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == hash_leaf("\udcff")

    def test_empty_elements(self, capsys):
        assert main(["root"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == ""

    def test_from_file(self, capsys, tmp_path):
        path = tmp_path / "elements.txt"
        path.write_text("some\ntest\nelements\n")

        assert main(["root", "--from-file", str(path)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == LITERAL_ROOT

    def test_missing_file(self, capsys, tmp_path):
        assert main(["root", "--from-file", str(tmp_path / "nope.txt")]) == EXIT_RUNTIME_ERROR
        assert "Error reading elements" in capsys.readouterr().err

    def test_output_format_from_config(self, capsys, tmp_path):
        config_path = tmp_path / "binmerkle.json"
        config_path.write_text(json.dumps({"default_output_format": "json"}))

        assert main(["root", "a", "b"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["root"] == build_merkle_tree(["a", "b"]).root_hash


class TestProveCommand:
    """Tests for `binmerkle prove`."""

    def test_prints_proof_document(self, capsys):
        assert main(["prove", "--index", "2", "some", "test", "elements"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)

        assert data["element"] == "elements"
        assert len(data["siblings"]) == 2
        assert data["directions"] == [True, False]
        assert data["root"] == LITERAL_ROOT

    def test_out_of_bounds(self, capsys):
        assert main(["prove", "--index", "3", "some", "test", "elements"]) == EXIT_RUNTIME_ERROR
        assert "out of bounds" in capsys.readouterr().err


class TestVerifyCommand:
    """Tests for `binmerkle verify`."""

    def test_valid_proof(self, capsys, tmp_path):
        proof_path = _write_proof(capsys, tmp_path, "--index", "1", "some", "test", "elements")

        assert main(["verify", proof_path]) == EXIT_SUCCESS
        assert "ok: true" in capsys.readouterr().out

    def test_valid_proof_against_explicit_root(self, capsys, tmp_path):
        proof_path = _write_proof(capsys, tmp_path, "--index", "0", "some", "test", "elements")

        assert main(["verify", proof_path, "--root", LITERAL_ROOT, "--json"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is True
        assert data["element"] == "some"

    def test_wrong_root_fails(self, capsys, tmp_path):
        proof_path = _write_proof(capsys, tmp_path, "--index", "0", "some", "test", "elements")
        other_root = build_merkle_tree(["other"]).root_hash

        assert main(["verify", proof_path, "--root", other_root]) == EXIT_VERIFICATION_FAILED
        out = capsys.readouterr().out
        assert "ok: false" in out
        assert "MERKLE_PROOF_INVALID" in out

    def test_json_failure_carries_error_code(self, capsys, tmp_path):
        proof_path = _write_proof(capsys, tmp_path, "--index", "0", "some", "test", "elements")
        other_root = build_merkle_tree(["other"]).root_hash

        assert main(["verify", proof_path, "--root", other_root, "--json"]) == EXIT_VERIFICATION_FAILED
        data = json.loads(capsys.readouterr().out)

        assert data["ok"] is False
        assert [err["code"] for err in data["errors"]] == [ErrorCodes.MERKLE_PROOF_INVALID]
        assert data["errors"][0]["details"]["root"] == other_root

    def test_json_success_has_no_errors(self, capsys, tmp_path):
        proof_path = _write_proof(capsys, tmp_path, "--index", "1", "some", "test", "elements")

        assert main(["verify", proof_path, "--json"]) == EXIT_SUCCESS
        assert "errors" not in json.loads(capsys.readouterr().out)

    def test_tampered_element_fails(self, capsys, tmp_path):
        proof_path = _write_proof(capsys, tmp_path, "--index", "2", "some", "test", "elements")
        document = json.loads(open(proof_path).read())
        document["element"] = "Elements"
        with open(proof_path, "w") as f:
            json.dump(document, f)

        assert main(["verify", proof_path]) == EXIT_VERIFICATION_FAILED

    def test_invalid_document(self, capsys, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"element": "a", "siblings": ["nothex"], "directions": [true]}')

        assert main(["verify", str(path)]) == EXIT_RUNTIME_ERROR
        assert "Error loading proof" in capsys.readouterr().err

    def test_missing_root(self, capsys, tmp_path):
        path = tmp_path / "noroot.json"
        path.write_text('{"element": "a"}')

        assert main(["verify", str(path)]) == EXIT_RUNTIME_ERROR

    def test_missing_file(self, capsys, tmp_path):
        assert main(["verify", str(tmp_path / "nope.json")]) == EXIT_RUNTIME_ERROR


class TestUpdateCommand:
    """Tests for `binmerkle update`."""

    def test_prints_new_root(self, capsys):
        assert main(["update", "--index", "0", "--value", "updated",
                     "some", "test", "elements"]) == EXIT_SUCCESS

        expected = build_merkle_tree(["updated", "test", "elements"]).root_hash
        assert capsys.readouterr().out.strip() == expected

    def test_json_output(self, capsys):
        assert main(["update", "--json", "-i", "1", "-v", "x", "a", "b"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)

        assert data["old_root"] == build_merkle_tree(["a", "b"]).root_hash
        assert data["new_root"] == build_merkle_tree(["a", "x"]).root_hash

    def test_out_of_bounds(self, capsys):
        assert main(["update", "--index", "2", "--value", "x", "a", "b"]) == EXIT_RUNTIME_ERROR


class TestConfigCommand:
    """Tests for `binmerkle config`."""

    def test_init_creates_file(self, capsys, tmp_path):
        assert main(["config", "--init"]) == EXIT_SUCCESS

        data = json.loads((tmp_path / "binmerkle.json").read_text())
        assert data["default_output_format"] == "human"

    def test_init_refuses_to_overwrite(self, capsys, tmp_path):
        (tmp_path / "binmerkle.json").write_text("{}")

        assert main(["config", "--init"]) == EXIT_RUNTIME_ERROR

    def test_show(self, capsys):
        assert main(["--trace", "config", "--show"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)

        assert data["trace_construction"] is True


class TestUnexpectedErrors:
    """Uncaught command errors become exit code 1."""

    @pytest.fixture
    def failing_build(self, monkeypatch):
        def _raise(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("binmerkle_cli.commands.root.build_merkle_tree", _raise)

    def test_message_only_by_default(self, capsys, failing_build):
        assert main(["root", "a"]) == EXIT_RUNTIME_ERROR
        err = capsys.readouterr().err

        assert "Error: boom" in err
        assert "Traceback" not in err

    @pytest.mark.parametrize("flags", [["--log-level", "DEBUG"], ["--trace"]])
    def test_traceback_at_debug_level(self, capsys, failing_build, flags):
        assert main([*flags, "root", "a"]) == EXIT_RUNTIME_ERROR

        assert "Traceback" in capsys.readouterr().err
