import docopt
import pytest
import subprocess

from script import Script
from scripts import vsort

doc = vsort.__doc__


class TestVsort(Script):
    script_name = 'vsort'

    def test_args(self):
        args = docopt.docopt(doc, [
            "--verbose",
            "--log-file", "some/log/file",
            "versions.txt",
        ])
        assert args["--verbose"]
        assert args["--log-file"] == "some/log/file"
        assert args["<path>"] == "versions.txt"

    def test_args_defaults(self):
        args = docopt.docopt(doc, [])
        assert not args["--verbose"]
        assert args["--log-file"] is None
        assert args["<path>"] is None

    def test_sort_stdin(self):
        out = subprocess.check_output(
            (self.script_name,),
            input="2.0\n1.0\n1.0-beta\n1.0-alpha\n1.10\n1.2\n",
            text=True,
        )
        assert out.splitlines() == [
            "1.0-alpha", "1.0-beta", "1.0", "1.2", "1.10", "2.0",
        ]

    def test_unknown_flag_rejected(self):
        with pytest.raises(docopt.DocoptExit):
            docopt.docopt(doc, ["--reverse"])

    def test_sort_keeps_carriage_return(self, tmp_path):
        path = tmp_path / "versions.txt"
        path.write_bytes(b"2.0\r1.0\n0.5\n")
        out = subprocess.check_output((self.script_name, str(path)))
        assert out == b"0.5\n2.0\r1.0\n"

    def test_sort_file(self, tmp_path):
        path = tmp_path / "versions.txt"
        path.write_text("1.0-RC1\n1.0\n1.0-Beta2\n")
        out = subprocess.check_output((self.script_name, str(path)), text=True)
        assert out.splitlines() == ["1.0-Beta2", "1.0-RC1", "1.0"]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        proc = subprocess.run(
            (self.script_name, str(path)),
            capture_output=True,
            text=True,
        )
        assert proc.returncode != 0
        assert proc.stdout == ""
        assert str(path) in proc.stderr

    def test_overflow(self):
        proc = subprocess.run(
            (self.script_name,),
            input="1.0\n1.99999999999999999999\n",
            capture_output=True,
            text=True,
        )
        assert proc.returncode != 0
        assert proc.stdout == ""
        assert "NumericOverflow" in proc.stderr
