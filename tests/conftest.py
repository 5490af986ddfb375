"""Shared fixtures: uploads of small, valid exports for both launch monitors."""
import pytest

from factories import R10_ROWS, awesome_golf_csv, awesome_golf_row, make_upload, r10_csv


@pytest.fixture
def r10_upload():
    return make_upload(r10_csv(*R10_ROWS), name="garmin_r10.csv")


@pytest.fixture
def awesome_golf_upload():
    return make_upload(
        awesome_golf_csv(
            awesome_golf_row(c0="2024-05-01 10:05:00"),
            awesome_golf_row(c0="2024-05-01 09:58:30", c6="240.0"),
            awesome_golf_row(c0="2024-05-01 10:10:00", c1="7 Iron", c6="160.0", c7="168.0"),
        ),
        name="awesome_golf.csv",
    )
