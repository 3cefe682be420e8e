import pytest

from wander.cli import main, random_scenario


def write_gate_scenario(d):
    d.mkdir(parents=True, exist_ok=True)
    (d / "nodes.txt").write_text("3 3\n1 1 2\n")
    edges = []
    for x in range(3):
        for y in range(3):
            for nx, ny in ((x, y + 1), (x + 1, y)):
                if nx < 3 and ny < 3:
                    w = 1 if (1, 1) in ((x, y), (nx, ny)) else 2
                    edges.append(f"{x}-{y},{nx}-{ny} {w}\n")
    (d / "edges.txt").write_text("".join(edges))
    (d / "objectives.txt").write_text("1\n0 0\n2 2 2\n0 0\n")
    return d


def test_run_writes_event_log(tmp_path, capsys):
    d = write_gate_scenario(tmp_path / "gate")
    out = tmp_path / "out" / "output.txt"
    main(["run", str(d / "nodes.txt"), str(d / "edges.txt"), str(d / "objectives.txt"), str(out)])
    lines = out.read_text().splitlines()
    assert lines[:6] == [
        "Moving to 0-1",
        "Path is impassable!",
        "Moving to 0-2",
        "Moving to 1-2",
        "Moving to 2-2",
        "Objective 1 reached!",
    ]
    assert lines[6] == "Number 2 is chosen!"
    assert lines[-1] == "Objective 2 reached!"
    assert "reached=  2" in capsys.readouterr().out


def test_run_reports_bad_input(tmp_path):
    d = write_gate_scenario(tmp_path / "bad")
    (d / "edges.txt").write_text("0-0,2-2 1\n")
    with pytest.raises(SystemExit) as e:
        main(["run", str(d / "nodes.txt"), str(d / "edges.txt"), str(d / "objectives.txt"), str(tmp_path / "o.txt")])
    assert e.value.code == 2


def test_gen_then_demo(tmp_path, capsys):
    out = tmp_path / "gen"
    main(["gen", "--rows", "8", "--cols", "8", "--objectives", "3", "--seed", "4", "--out", str(out)])
    assert (out / "nodes.txt").exists() and (out / "objectives.txt").exists()
    main(["demo", "--dir", str(out)])
    text = (out / "output.txt").read_text()
    assert text.endswith("\n")
    assert "gen" in capsys.readouterr().out


def test_random_scenario_is_reproducible():
    a = random_scenario(6, 6, 0.2, 0.1, [2, 3], 4, 2, 0.5, seed=9)
    b = random_scenario(6, 6, 0.2, 0.1, [2, 3], 4, 2, 0.5, seed=9)
    assert a.objectives == b.objectives
    assert a.grid.node_types == b.grid.node_types
    for o in a.objectives:
        assert a.grid.node_type(o.destination) == 0


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    import io
    import logging
    from wander.logging_utils import setup_logging

    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        for h in list(root.handlers):
            root.removeHandler(h)
        buf = io.StringIO()
        log_file = tmp_path / "logs" / "wander.log"
        setup_logging(logging.INFO, log_file=str(log_file), stream=buf)
        setup_logging(logging.INFO, log_file=str(log_file), stream=buf)
        assert len(root.handlers) == 2
        logging.getLogger("wander.test").info("hello")
        assert "| INFO | wander.test | hello" in buf.getvalue()
        for h in root.handlers:
            h.flush()
        assert "hello" in log_file.read_text()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
