from diagram_paths import demo


def test_demo_prints_vertices_and_boxes(capsys):
    demo.run()
    out = capsys.readouterr().out
    assert "Path: Path(trails=2)" in out
    assert "(0, 0) -> (2, 0) -> (2, 2) -> (0, 2)" in out
    assert "Bounding box: (0.0000, " in out
    assert "Rotated box:" in out
