import socket
from pathlib import Path
import pytest

from spellserver.__main__ import main


def test_missing_dictionary_exits_with_error(tmp_path: Path, capsys):
    assert main(["--dictionary", str(tmp_path / "nope.txt"), "--port", "0"]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_busy_port_exits_with_error(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("cat\n", encoding="utf-8")
    with socket.socket() as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        port = busy.getsockname()[1]
        assert main(["--dictionary", str(p), "--host", "127.0.0.1", "--port", str(port)]) == 1
