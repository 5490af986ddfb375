from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from factories import R10_ROWS, awesome_golf_csv, awesome_golf_row, r10_csv
from practice.models import Session, SourceType

pytestmark = pytest.mark.django_db


def run_import(path, *args):
    out, err = StringIO(), StringIO()
    call_command('import_shots', str(path), *args, stdout=out, stderr=err)
    return out.getvalue(), err.getvalue()


def test_imports_garmin_r10_by_default(tmp_path):
    path = tmp_path / "range.csv"
    path.write_text(r10_csv(*R10_ROWS, "4,Driver"))

    out, err = run_import(path, "--title", "Range day", "--location", "Home")

    session = Session.objects.get()
    assert session.source_type == SourceType.GARMIN_R10
    assert session.location == "Home"
    assert session.shots.count() == 3
    assert f"Created session {session.pk} 'Range day' with 3 shots (1 rows skipped)" in out
    assert "Row 5: Malformed row" in err


def test_imports_awesome_golf(tmp_path):
    path = tmp_path / "sim.csv"
    path.write_text(awesome_golf_csv(awesome_golf_row(), awesome_golf_row(c1="PW")))

    run_import(path, "--title", "Sim", "--source", "awesome_golf")

    session = Session.objects.get()
    assert session.source_type == SourceType.AWESOME_GOLF
    assert list(session.shots.values_list("club", flat=True)) == ["Driver", "PW"]


def test_missing_file(tmp_path):
    with pytest.raises(CommandError, match="File not found"):
        run_import(tmp_path / "nope.csv", "--title", "Range day")


def test_import_errors_become_command_errors(tmp_path):
    path = tmp_path / "range.csv"
    path.write_text(r10_csv("1,Driver"))

    with pytest.raises(CommandError, match="No valid shots"):
        run_import(path, "--title", "Range day")
    assert not Session.objects.exists()
