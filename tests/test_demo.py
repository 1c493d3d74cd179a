import io

from modinit.demo import build_registry, main


def test_build_registry_has_two_modules():
    reg = build_registry(io.StringIO())
    regs = list(reg)
    assert [r.name for r in regs] == ["module_a", "module_b"]
    assert regs[1].dependencies == ("module_a",)


def test_init_order():
    out = io.StringIO()
    reg = build_registry(out)
    reg.init()
    assert out.getvalue().splitlines() == [
        "Module A initialized",
        "Module B initialized",
    ]


def test_close_order_is_reverse_of_dependencies():
    out = io.StringIO()
    reg = build_registry(out)
    reg.init()
    reg.destroy()
    lines = out.getvalue().splitlines()
    assert lines[2:] == ["Module B closed", "Module A closed"]
    assert len(reg) == 0


def test_main_runs_app(capsys, tmp_path):
    error_file = tmp_path / "error.txt"
    status = main(["--error-file", str(error_file)])
    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert lines == [
        "Module A initialized",
        "Module B initialized",
        "App is working...",
        "Module B closed",
        "Module A closed",
    ]
    assert not error_file.exists()