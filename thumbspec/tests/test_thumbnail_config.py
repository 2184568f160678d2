"""Tests for ThumbnailConfig and merge_config."""

import dataclasses

import pytest

from thumbspec.errors import InvalidTimeFormat, InvalidType, ThumbnailConfigError
from thumbspec.thumbnail_config import (
    ThumbnailConfig,
    clamp_quality,
    merge_config,
    validate_time,
    validate_type,
)


class TestMergeConfig:
    """Tests for merging options over defaults."""

    def test_defaults(self):
        """Test merging nothing gives the defaults."""
        config = merge_config()

        assert config.prefix == 'thumbnails/'
        assert config.width == 180
        assert config.height == 180
        assert config.time == '00:00:05'
        assert config.type == 'jpg'
        assert config.quality == 2
        assert config.path is None
        assert config.suffix is None
        assert config.output_bucket is None

    def test_overrides_win_field_by_field(self):
        """Test supplied fields replace defaults and others are kept."""
        config = merge_config({'width': 320, 'suffix': '-small'})

        assert config.width == 320
        assert config.suffix == '-small'
        assert config.height == 180
        assert config.prefix == 'thumbnails/'

    def test_none_does_not_mask_default(self):
        """Test None values count as not supplied."""
        config = merge_config({'prefix': None, 'quality': None})

        assert config.prefix == 'thumbnails/'
        assert config.quality == 2

    def test_camel_case_alias(self):
        """Test outputBucket is accepted as output_bucket."""
        config = merge_config({'outputBucket': 'thumbs'})

        assert config.output_bucket == 'thumbs'

    def test_accepts_config_instance(self):
        """Test a full ThumbnailConfig can be merged."""
        config = merge_config(ThumbnailConfig(type='PNG', quality=42))

        assert config.type == 'png'
        assert config.quality == 10

    def test_unknown_option(self):
        """Test unknown options are rejected."""
        with pytest.raises(ThumbnailConfigError, match='colour'):
            merge_config({'colour': 'red'})

    def test_invalid_type(self):
        """Test an unsupported type fails the merge."""
        with pytest.raises(InvalidType):
            merge_config({'type': 'gif'})

    def test_empty_type_falls_back_to_jpg(self):
        """Test an empty type uses the default."""
        assert merge_config({'type': ''}).type == 'jpg'

    @pytest.mark.parametrize('given,expected', [(0, 1), (-5, 1), (15, 10), (1, 1), (10, 10), (7, 7)])
    def test_quality_clamped(self, given, expected):
        """Test quality always ends up in 1-10."""
        assert merge_config({'quality': given}).quality == expected

    @pytest.mark.parametrize('field', ['width', 'height'])
    @pytest.mark.parametrize('value', [0, -5, 'abc', 12.5, True])
    def test_dimension_must_be_positive_int(self, field, value):
        """Test width and height must be positive integers."""
        with pytest.raises(ThumbnailConfigError, match=f'{field} must be a positive integer'):
            merge_config({field: value})

    def test_non_string_type(self):
        """Test a non-string type is rejected as an invalid type."""
        with pytest.raises(InvalidType):
            merge_config({'type': 5})

    def test_time_not_validated(self):
        """Test the merge leaves time alone."""
        assert merge_config({'time': 'soon'}).time == 'soon'

    def test_result_is_frozen(self):
        """Test merged configs cannot be mutated."""
        config = merge_config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.width = 10


class TestValidators:
    """Tests for the validation helpers."""

    @pytest.mark.parametrize('value', ['jpg', 'JPEG', 'Png', 'webp'])
    def test_valid_types(self, value):
        assert validate_type(value) == value.lower()

    @pytest.mark.parametrize('value', ['gif', 'jpgx', 'tiff', ''])
    def test_invalid_types(self, value):
        with pytest.raises(InvalidType, match='Valid types are jpg, png or webp'):
            validate_type(value)

    def test_valid_time(self):
        assert validate_time('01:02:03') == '01:02:03'

    @pytest.mark.parametrize('value', ['1:02:03', '01:02', 'aa:bb:cc', '01:02:03.5', ''])
    def test_invalid_time(self, value):
        with pytest.raises(InvalidTimeFormat, match='must match format 00:00:00'):
            validate_time(value)

    def test_clamp_quality(self):
        assert clamp_quality(0) == 1
        assert clamp_quality(11) == 10
        assert clamp_quality(5) == 5

    def test_errors_are_value_errors(self):
        """Test callers can catch validation failures as ValueError."""
        with pytest.raises(ValueError):
            validate_type('bmp')
