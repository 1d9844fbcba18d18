from pathlib import Path

import pytest

from cpcrain.io import YearFileLocator

pytestmark = pytest.mark.unit


def touch(path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


def test_path_for(data_dir):
    locator = YearFileLocator(data_dir)
    assert locator.path_for(2012) == data_dir / "cpcRain_2012.nc"


def test_available_years_parses_matching_files(data_dir):
    for name in ["cpcRain_1999.nc", "cpcRain_2012.nc", "cpcRain_abcd.nc",
                 "cpcRain_2013.nc.tmp", "README.md", "other_2014.nc"]:
        touch(data_dir / name)
    (data_dir / "cpcRain_2015.nc").mkdir()

    assert YearFileLocator(data_dir).available_years() == {1999, 2012}


def test_missing_directory_has_no_years(tmp_path):
    assert YearFileLocator(tmp_path / "nope").available_years() == set()


def test_custom_pattern(data_dir):
    touch(data_dir / "precip.V1.0.2001.nc")
    touch(data_dir / "precipXV1X0X2002.nc")
    locator = YearFileLocator(data_dir, "precip.V1.0.{year}.nc")

    assert locator.available_years() == {2001}
    assert locator.path_for(2002) == data_dir / "precip.V1.0.2002.nc"


def test_pattern_requires_year(data_dir):
    with pytest.raises(ValueError, match="year"):
        YearFileLocator(data_dir, "cpcRain.nc")


def test_from_config(internal_config, data_dir):
    locator = YearFileLocator.from_config(internal_config)
    assert locator.data_dir == data_dir
    assert locator.filename_pattern == "cpcRain_{year}.nc"
