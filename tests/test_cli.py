import logging

from netblock.cli import configure_logging, main


def test_cli_describe(capsys):
    assert main(["192.168.75.10/29"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "network   192.168.75.8",
        "broadcast 192.168.75.15",
        "netmask   255.255.255.248",
        "hostmask  0.0.0.7",
        "bits      29",
        "size      8",
    ]


def test_cli_mask_argument(capsys):
    assert main(["192.168.0.0", "255.255.255.252"]) == 0
    assert "size      4" in capsys.readouterr().out


def test_cli_contains(capsys):
    assert main(["192.168.75.8/29", "--contains", "192.168.75.10"]) == 0
    assert capsys.readouterr().out == "2\n"
    assert main(["192.168.75.8/29", "--contains", "192.168.75.16"]) == 1
    assert capsys.readouterr().out == "not contained\n"


def test_cli_nth(capsys):
    assert main(["10.0.0.0/8", "--nth", "10000", "--nth", "0"]) == 0
    assert capsys.readouterr().out == "10.0.39.16\n10.0.0.0\n"


def test_cli_enumerate_blocks(capsys):
    assert main(["192.168.75.8/29", "--enumerate", "--bits", "30", "--blocks"]) == 0
    assert capsys.readouterr().out == "192.168.75.8/30\n192.168.75.12/30\n"


def test_cli_next_prev(capsys):
    assert main(["192.168.75.8/29", "--next", "--prev"]) == 0
    assert capsys.readouterr().out == "192.168.75.16/29\n192.168.75.0/29\n"


def test_cli_errors(capsys):
    assert main(["10.0.0.300/8"]) == 1
    assert capsys.readouterr().err.startswith("error: ")
    assert main(["255.255.255.255/32", "--next"]) == 1
    assert "error: " in capsys.readouterr().err
    assert main(["10.0.0.0/8", "--nth", "1", "--bits", "4"]) == 1
    assert "error: " in capsys.readouterr().err


def test_configure_logging_from_environment(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("NETBLOCK_LOG_LEVEL", "info")
    configure_logging()
    assert root.level == logging.INFO


def test_cli_oversized_octet(capsys):
    assert main(["1.2.3." + "9" * 5000 + "/8"]) == 1
    assert capsys.readouterr().err.startswith("error: ")
    assert main(["10.0.0.0/" + "0" * 5000 + "8"]) == 1
    assert capsys.readouterr().err.startswith("error: ")
