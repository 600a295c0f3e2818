import os

import pytest

from ninetools.chown import change_owner, main, resolve_group, resolve_user


def test_numeric_user():
    assert resolve_user(str(os.getuid())) == os.getuid()


def test_numeric_group():
    assert resolve_group(str(os.getgid())) == os.getgid()


def test_signed_numeric_user():
    assert resolve_user("+0") == 0


def test_named_root_user():
    assert resolve_user("root") == 0


def test_unknown_user_raises():
    with pytest.raises(ValueError, match="invalid user"):
        resolve_user("no-such-user-zzq")


def test_unknown_group_raises():
    with pytest.raises(ValueError, match="invalid group"):
        resolve_group("no-such-group-zzq")


def test_change_owner_to_self(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    uid, gid = change_owner(str(target), str(os.getuid()), str(os.getgid()))
    st = os.stat(target)
    assert (st.st_uid, st.st_gid) == (uid, gid)


def test_main_usage():
    assert main(["only"]) == 1


def test_main_invalid_user(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    assert main(["no-such-user-zzq", "0", str(target)]) == 1


def test_main_success(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    assert main([str(os.getuid()), str(os.getgid()), str(target)]) == 0