"""End-to-end tests for the command line."""

from decode_archive import main

MONALISA = "^a^^!^dc^rb\n10110101011101101010100\n"


class TestMain:
    def test_decode(self, write_archive, capsys):
        path = write_archive(MONALISA, name="monalisa.arch")
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "!\t\t\t100" in out
        assert "Message:\ncadbard!\n" in out
        assert "Avg bits/char:       \t2.9" in out
        assert "Total characters:    \t8" in out
        assert "Space Savings:       \t65.2%" in out

    def test_newline_leaf(self, write_archive, capsys):
        path = write_archive("^^ab^c^d\n\n000111110110\n")
        assert main([str(path), "--quiet"]) == 0
        out = capsys.readouterr().out
        assert "code:" not in out
        assert "Message:\nab\ncd\n" in out

    def test_exports(self, write_archive, tmp_path, capsys):
        path = write_archive(MONALISA)
        codes = tmp_path / "codes.csv"
        stats = tmp_path / "stats.csv"
        plot = tmp_path / "codes.png"
        rc = main([str(path), "--csv", str(codes), "--stats-csv", str(stats), "--plot", str(plot)])
        assert rc == 0
        assert codes.read_text(encoding="utf-8").splitlines()[0] == "character,code,bits"
        assert stats.exists()
        assert plot.exists()
        assert "Wrote 6 codes" in capsys.readouterr().out

    def test_wrong_extension(self, write_archive, capsys):
        path = write_archive(MONALISA, name="monalisa.txt")
        assert main([str(path)]) == 1
        assert "wrong file type" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.arch")]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_not_utf8(self, tmp_path, capsys):
        path = tmp_path / "latin.arch"
        path.write_bytes(b"^\xe9b\n01\n")
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("error:")
        assert "not valid UTF-8" in err

    def test_malformed_shape(self, write_archive, capsys):
        path = write_archive("^a^b\n0101\n")
        assert main([str(path)]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_empty_shape(self, write_archive, capsys):
        path = write_archive("0101\n")
        assert main([str(path)]) == 1
        assert "empty" in capsys.readouterr().err

    def test_degenerate_tree(self, write_archive, capsys):
        path = write_archive("x\n0101\n")
        assert main([str(path)]) == 1
        assert "leaf" in capsys.readouterr().err

    def test_strict(self, write_archive, capsys):
        path = write_archive("^a^^!^dc^rb\n0101\n")
        assert main([str(path)]) == 0
        assert "Message:\na\n" in capsys.readouterr().out
        assert main([str(path), "--strict"]) == 1
