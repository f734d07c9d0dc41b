import json

import pytest

from chaincheck import checkpoints
from chaincheck.checkpoints import (
    CheckpointSet,
    NetworkProfile,
    default_profiles,
    entries_descending,
    load_profiles_file,
    lookup,
    max_entry,
    max_height,
    select_profile,
)


def test_builtin_main_table():
    profile = select_profile("main")
    assert len(profile.checkpoints) == 16
    assert max_height(profile) == 500000
    assert max_entry(profile).hash == "000000c8d4e43f5579c728e870198ea236daddae7f6bea62003e993ccb657ac9"
    assert lookup(profile, 0) == "00000c31cbfa287f2bc7c6c5634475883af72c6dd47cd3d27341bc668f731c81"
    assert lookup(profile, 4701) is None


def test_builtin_test_table():
    profile = select_profile("test")
    assert max_height(profile) == 0
    assert profile.estimated_transactions_per_day == 100.0
    assert select_profile("testnet") is profile


def test_default_profiles_built_once():
    assert default_profiles() is default_profiles()


def test_select_profile_explicit(small_profiles):
    assert select_profile("main", small_profiles) is small_profiles.main
    assert select_profile("test", small_profiles) is small_profiles.test


def test_unknown_network_rejected():
    with pytest.raises(RuntimeError):
        select_profile("regtest")


def test_entries_descending_restartable(small_profiles):
    profile = small_profiles.main
    first = [e.height for e in entries_descending(profile)]
    second = [e.height for e in entries_descending(profile)]
    assert first == second == [200, 100, 0]
    assert [e.height for e in profile.checkpoints] == [0, 100, 200]


def test_hash_normalized(hash_of):
    raw = "0x" + hash_of(7).upper()
    cps = CheckpointSet([(7, raw)])
    assert cps.get(7) == hash_of(7)


@pytest.mark.parametrize(
    "entries",
    [
        [],
        [(5, "0" * 64), (5, "1" * 64)],
        [(10, "0" * 64), (5, "1" * 64)],
        [(-1, "0" * 64)],
        [(0, "abc")],
        [(0, "z" * 64)],
    ],
)
def test_bad_tables_rejected(entries):
    with pytest.raises(ValueError):
        CheckpointSet(entries)


def test_profile_dict_roundtrip(small_profiles):
    profile = small_profiles.main
    assert NetworkProfile.from_dict(json.loads(json.dumps(profile.to_dict()))) == profile


def test_load_single_profile_file(tmp_path, small_profiles):
    path = tmp_path / "main.json"
    path.write_text(json.dumps(small_profiles.main.to_dict()))
    profiles = load_profiles_file(str(path), "main")
    assert profiles.main == small_profiles.main
    assert profiles.test == checkpoints.load_builtin_profiles().test

    profiles = load_profiles_file(str(path), "test")
    assert profiles.test == small_profiles.main
    assert max_height(profiles.main) == 500000


def test_load_both_profiles_file(tmp_path, small_profiles):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(small_profiles.to_dict()))
    assert load_profiles_file(str(path)) == small_profiles


def test_load_profile_file_rejects_garbage(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"checkpoints": [[0]]}))
    with pytest.raises(ValueError):
        load_profiles_file(str(path))
    path.write_text(json.dumps([1, 2, 3]))
    with pytest.raises(ValueError):
        load_profiles_file(str(path))
