import pytest

from road_bumps.config import load_config
from road_bumps.detector import DEFAULT_BUMP, DEFAULT_POTHOLE, DetectionSettings


def test_load_default_config():
    """Test that the packaged configuration matches the default settings."""
    config = load_config()
    assert set(config) == {"bump", "pothole"}
    assert config["bump"] == DEFAULT_BUMP
    assert config["pothole"] == DEFAULT_POTHOLE


def test_load_config(tmp_path):
    """Test loading a custom configuration."""
    fname = tmp_path / "config.ini"
    fname.write_text(
        "[bump]\nheight = 1.5\ndistance = 10  # samples\nwidth = none\n\n"
        "[pothole]\nprominence = 2\nrel_height = 0.25\n"
    )
    config = load_config(fname)
    assert config["bump"] == DetectionSettings(height=1.5, distance=10)
    assert config["pothole"] == DetectionSettings(prominence=2, rel_height=0.25)
    assert config["pothole"].height is None
    config = load_config(str(fname))
    assert config["bump"].height == 1.5


def test_load_invalid_config(tmp_path):
    """Test loading invalid configurations."""
    with pytest.raises(FileNotFoundError, match="does not exist"):
        load_config(tmp_path / "missing.ini")
    fname = tmp_path / "config.txt"
    fname.write_text("[bump]\n[pothole]\n")
    with pytest.raises(ValueError, match="must be an '.ini' file"):
        load_config(fname)
    fname = tmp_path / "config.ini"
    fname.write_text("[bump]\nheight = 1\n")
    with pytest.raises(ValueError, match="Key 'pothole' is missing"):
        load_config(fname)
    fname.write_text("[bump]\nthreshold = 1\n[pothole]\n")
    with pytest.raises(ValueError, match="Unknown key"):
        load_config(fname)
    fname.write_text("[bump]\nheight = high\n[pothole]\n")
    with pytest.raises(ValueError, match="must be a number or 'none'"):
        load_config(fname)
    fname.write_text("[bump]\ndistance = 0.5\n[pothole]\n")
    with pytest.raises(ValueError, match="greater or equal to 1 sample"):
        load_config(fname)
    with pytest.raises(TypeError, match="'fname' must be an instance"):
        load_config(101)
