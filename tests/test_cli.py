from shiftroster.cli import main, sample_registry


def test_sample_registry_contents():
    registry = sample_registry()
    assert [d.name for d in registry] == ["Doni", "Rena", "Levi", "Alvi", "Vely"]
    assert [d.max_shift_per_week for d in registry] == [6, 5, 4, 4, 5]
    assert registry.check_preference(1, 1, 0) is False
    assert registry.check_preference(3, 6, 0) is False
    assert registry.get(4).preference == registry.get(2).preference


def test_main_prints_thirty_days(capsys):
    assert main(["--seed", "11"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    for number in range(1, 31):
        assert lines[number - 1].startswith(f"{number}    [")
    assert lines[30] == ""


def test_main_is_reproducible_with_seed(capsys):
    main(["--seed", "4"])
    first = capsys.readouterr().out
    main(["--seed", "4"])
    second = capsys.readouterr().out
    assert first == second


def test_main_conflict_report_lines(capsys):
    main(["--seed", "9"])
    out = capsys.readouterr().out
    report = out.split("\n", 31)[-1]
    blocks = [block for block in report.split("\n\n") if block]
    for block in blocks:
        id_line, slot_line = block.split("\n")
        assert id_line.startswith("id : ")
        assert slot_line.startswith("Hari : ")