import pytest

from employee_manager.exceptions import MalformedRecord, StorageError
from employee_manager.models.employee import (
    FULL_PERMS, GENERAL_PERMS, HR_PERMS, MANAGEMENT_PERMS, Employee, build_permissions,
)


def make(**overrides):
    fields = dict(id=7, username="jdoe", first_name="Jane", last_name="Doe",
                  password="secret", permissions=GENERAL_PERMS)
    fields.update(overrides)
    return Employee(**fields)


def test_is_valid_login_requires_exact_match():
    e = make()
    assert e.is_valid_login("jdoe", "secret") is True
    assert e.is_valid_login("JDOE", "secret") is False
    assert e.is_valid_login("jdoe", "Secret") is False
    assert e.is_valid_login("jdoe", "") is False


@pytest.mark.parametrize("hr_bit", [4, 8, 16])
def test_has_permission_passes_with_any_single_hr_bit(hr_bit):
    # HR_PERMS is three bits; one overlapping bit is enough
    e = make(permissions=GENERAL_PERMS | hr_bit)
    assert e.has_permission(HR_PERMS) is True
    assert e.has_permission(MANAGEMENT_PERMS) is False


def test_has_permission_groups():
    general = make(permissions=GENERAL_PERMS)
    assert general.has_permission(GENERAL_PERMS)
    assert not general.has_permission(HR_PERMS)
    assert not general.has_permission(HR_PERMS | MANAGEMENT_PERMS)

    full = make(permissions=FULL_PERMS)
    assert FULL_PERMS == 31
    for mask in (GENERAL_PERMS, MANAGEMENT_PERMS, HR_PERMS):
        assert full.has_permission(mask)


def test_build_permissions():
    assert build_permissions(False, False) == 1
    assert build_permissions(False, True) == 3
    assert build_permissions(True, False) == 29
    assert build_permissions(True, True) == 31


def test_update_password_and_permissions_only_touch_memory(tmp_path):
    e = make()
    e.save(tmp_path)
    e.update_password("changed")
    e.update_permissions(FULL_PERMS)
    assert e.is_valid_login("jdoe", "changed")
    assert e.permissions == FULL_PERMS

    on_disk = Employee.from_file(tmp_path / "7.txt")
    assert on_disk.password == "secret"
    assert on_disk.permissions == GENERAL_PERMS


def test_password_is_not_in_repr():
    assert "secret" not in repr(make())


def test_summary_and_profile():
    e = make()
    assert e.summary() == "7: Jane Doe, jdoe"
    assert e.profile() == "ID: 7\nName: Jane Doe\nUsername: jdoe\n"


def test_serialize_is_one_comma_separated_line():
    assert make().serialize() == "7,jdoe,Jane,Doe,secret,1"


def test_names_with_spaces_and_commas_survive_storage():
    e = make(first_name="Mary Ann", last_name="van der Berg, Jr.", password='p@ss "word"')
    line = e.serialize()
    assert "\n" not in line
    assert Employee.deserialize(line) == e


def test_deserialize_reads_old_whitespace_format():
    e = Employee.deserialize("1 testing Titus Moore password 31")
    assert e == Employee(1, "testing", "Titus", "Moore", "password", 31)


@pytest.mark.parametrize("line", [
    "",
    "1,testing,Titus",
    "1 testing Titus Moore",
    "1,testing,Titus,Moore,password,31,extra",
    "one,testing,Titus,Moore,password,31",
    "1,testing,Titus,Moore,password,all",
    "0,testing,Titus,Moore,password,31",
    "1,testing,Titus,Moore,password,-1",
    "1,testing,Titus,Moore,password,32",
    "1,,Titus,Moore,password,31",
    "1,a,b,c,d,1\n2,a,b,c,d,1",
])
def test_deserialize_rejects_malformed_records(line):
    with pytest.raises(MalformedRecord):
        Employee.deserialize(line)


def test_save_writes_file_named_by_id(tmp_path):
    e = make(first_name="Mary Ann")
    path = e.save(tmp_path)
    assert path == tmp_path / "7.txt"
    assert Employee.from_file(path) == e
    assert not (tmp_path / "7.txt.tmp").exists()


def test_save_overwrites_existing_record(tmp_path):
    e = make()
    e.save(tmp_path)
    e.last_name = "Smith"
    e.save(tmp_path)
    assert Employee.from_file(tmp_path / "7.txt").last_name == "Smith"


def test_save_without_id_fails(tmp_path):
    with pytest.raises(StorageError):
        make(id=None).save(tmp_path)


def test_save_into_missing_directory_fails(tmp_path):
    with pytest.raises(StorageError):
        make().save(tmp_path / "does-not-exist")


def test_from_file_rejects_binary_content(tmp_path):
    path = tmp_path / "3.txt"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(MalformedRecord):
        Employee.from_file(path)
