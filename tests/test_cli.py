"""Tests for the cqcode command line."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from cqcode.cli import cli
from cqcode.errors import DecodeError


def _run(*args, input=None):
    return CliRunner().invoke(cli, list(args), input=input)


# ── codec commands ───────────────────────────────────────────

class TestCodecCommands:
    def test_decode(self):
        result = _run("decode", "hi[CQ:at,qq=1]")
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"type": "text", "data": {"text": "hi"}},
            {"type": "at", "data": {"qq": "1"}},
        ]

    def test_decode_stdin(self):
        result = _run("decode", "-", input="[CQ:face,id=1]")
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"type": "face", "data": {"id": "1"}}]

    def test_decode_failure_exits_1(self):
        with patch("cqcode.codec.decode", side_effect=DecodeError("broken")):
            result = _run("decode", "x")
        assert result.exit_code == 1
        assert "Decode failed" in result.output

    def test_encode_stdin(self):
        segments = [{"type": "text", "data": {"text": "a,b"}}, {"type": "at", "data": {"qq": 1}}]
        result = _run("encode", input=json.dumps(segments))
        assert result.exit_code == 0
        assert result.output.strip() == "a&#44;b[CQ:at,qq=1]"

    def test_encode_invalid_json(self):
        result = _run("encode", input="{not json")
        assert result.exit_code == 1
        assert "Invalid segment array" in result.output

    def test_encode_not_an_array(self):
        result = _run("encode", input='{"type": "text"}')
        assert result.exit_code == 1

    def test_escape(self):
        result = _run("escape", "[a,b]&")
        assert result.output.strip() == "&#91;a&#44;b&#93;&amp;"

    def test_escape_brackets_only(self):
        result = _run("escape", "--brackets-only", "[a,b]&")
        assert result.output.strip() == "&#91;a,b&#93;&"

    def test_unescape(self):
        result = _run("unescape", "&#91;a&#44;b&#93;&amp;")
        assert result.output.strip() == "[a,b]&"

    def test_inspect(self):
        result = _run("inspect", "[CQ:at,qq=all][CQ:at,qq=7][CQ:image,url=http://x/i.png]")
        assert result.exit_code == 0
        assert "Mentions everyone: True" in result.output
        assert "Mentioned ids: [7]" in result.output
        assert "Image: http://x/i.png" in result.output

    def test_inspect_invalid_qq(self):
        result = _run("inspect", "[CQ:at,qq=abc]")
        assert result.exit_code == 0
        assert "invalid qq value" in result.output

    def test_forward(self):
        result = _run("forward", "--uin", "10001", "--name", "bot", "one", "two")
        assert result.exit_code == 0
        nodes = json.loads(result.output)
        assert [n["data"]["content"] for n in nodes] == ["one", "two"]
        assert nodes[0]["data"]["uin"] == 10001


# ── profile commands ─────────────────────────────────────────

class TestProfileCommands:
    def test_avatar_user(self):
        result = _run("avatar", "10001", "--size", "100")
        assert result.output.strip() == "https://q1.qlogo.cn/g?b=qq&nk=10001&s=100"

    def test_avatar_group_default_size(self, monkeypatch):
        monkeypatch.setenv("CQCODE_AVATAR_SIZE", "40")
        result = _run("avatar", "123", "--group")
        assert result.output.strip() == "https://p.qlogo.cn/gh/123/123/40"

    def test_nickname(self):
        with patch("cqcode.profile.fetch_nickname", AsyncMock(return_value="小明")):
            result = _run("nickname", "10001")
        assert result.exit_code == 0
        assert result.output.strip() == "小明"

    def test_nickname_not_found(self):
        with patch("cqcode.profile.fetch_nickname", AsyncMock(return_value="")):
            result = _run("nickname", "10001")
        assert result.exit_code == 1
        assert "No nickname found" in result.output


# ── help ─────────────────────────────────────────────────────

class TestHelp:
    def test_no_subcommand_shows_groups(self):
        result = _run()
        assert result.exit_code == 0
        assert "Codec" in result.output
        assert "Profile" in result.output

    def test_version(self):
        result = _run("--version")
        assert "0.1.0" in result.output


# ── entry point ──────────────────────────────────────────────

class TestMain:
    def test_unknown_command_exits_2(self, monkeypatch, capsys):
        from cqcode.cli import main

        monkeypatch.setattr("sys.argv", ["cqcode", "no-such-command"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2
        assert "cqcode help" in capsys.readouterr().err

    def test_invalid_log_level_still_runs(self, monkeypatch):
        monkeypatch.setenv("CQCODE_LOG_LEVEL", "LOUD")
        result = _run("escape", "a,b")
        assert result.exit_code == 0
        assert result.output.strip().endswith("a&#44;b")
