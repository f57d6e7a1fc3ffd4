from homeowners import load_dataset, run_check, setup_env


def test_run_check_reports_missing_csv(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(load_dataset, "RAW_CSV_PATH", tmp_path / "missing.csv")
    run_check.main()
    out = capsys.readouterr().out
    assert "[fail]" in out


def test_run_check_parses_csv(tmp_path, monkeypatch, capsys):
    path = tmp_path / "HomeOwnerList.csv"
    path.write_text("homeowner\nMr and Mrs Smith\n", encoding="utf-8")
    monkeypatch.setattr(load_dataset, "RAW_CSV_PATH", path)
    run_check.main()
    out = capsys.readouterr().out
    assert "[success] parsed 2 homeowners." in out
    assert "Mr  Smith" in out


def test_setup_env_lists_libraries(capsys):
    setup_env.check_versions()
    out = capsys.readouterr().out
    assert "pandas" in out
    assert "regex" in out
