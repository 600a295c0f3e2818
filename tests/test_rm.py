from ninetools.rm import main, remove_path, remove_tree


def _tree(root):
    (root / "d" / "sub").mkdir(parents=True)
    (root / "d" / "f").write_text("x")
    (root / "d" / "sub" / "g").write_text("y")
    return root / "d"


def test_remove_file(tmp_path):
    f = tmp_path / "f"
    f.write_text("x")
    assert remove_path(str(f)) == []
    assert not f.exists()


def test_remove_empty_dir(tmp_path):
    d = tmp_path / "d"
    d.mkdir()
    assert remove_path(str(d)) == []
    assert not d.exists()


def test_non_recursive_dir_with_contents(tmp_path):
    d = _tree(tmp_path)
    errors = remove_path(str(d))
    assert len(errors) == 1
    assert errors[0].startswith(str(d))
    assert d.is_dir()


def test_recursive_removes_tree(tmp_path):
    d = _tree(tmp_path)
    assert remove_path(str(d), recursive=True) == []
    assert not d.exists()


def test_remove_tree_directly(tmp_path):
    d = _tree(tmp_path)
    assert remove_tree(str(d)) == []
    assert list(tmp_path.iterdir()) == []


def test_missing_reports_error(tmp_path):
    missing = str(tmp_path / "missing")
    errors = remove_path(missing)
    assert len(errors) == 1
    assert errors[0].startswith(missing + ": ")


def test_main_missing_fails(tmp_path):
    assert main([str(tmp_path / "missing")]) == 1


def test_main_force_ignores(tmp_path):
    assert main(["-f", str(tmp_path / "missing")]) == 0


def test_main_usage():
    assert main([]) == 1
    assert main(["-z", "x"]) == 1


def test_main_recursive(tmp_path):
    d = _tree(tmp_path)
    assert main(["-r", str(d)]) == 0
    assert not d.exists()