"""Tests for the channel model and band classification."""

import pytest

from tvtuner.core.channels import Band, Channel, InvalidFrequency, band_for_frequency


class TestBandClassification:
    """Test frequency to band mapping."""

    @pytest.mark.parametrize("frequency,band", [
        (54, Band.VHF_LOW),
        (70, Band.VHF_LOW),
        (88, Band.VHF_LOW),
        (174, Band.VHF_HIGH),
        (216, Band.VHF_HIGH),
        (470, Band.UHF),
        (608, Band.UHF),
    ])
    def test_band_edges(self, frequency, band):
        """Range limits are inclusive."""
        assert band_for_frequency(frequency) is band
        assert Channel("Edge", frequency).band is band

    @pytest.mark.parametrize("frequency", [0, 53, 89, 100, 173, 217, 469, 609, -54])
    def test_outside_bands_is_unknown(self, frequency):
        assert band_for_frequency(frequency) is Band.UNKNOWN


class TestChannelConstruction:
    """Test channel creation and validation."""

    @pytest.mark.parametrize("frequency", [53, 89, 100, 173, 217, 469, 609])
    def test_invalid_frequency_rejected(self, frequency):
        """Frequencies outside every band fail at construction."""
        with pytest.raises(InvalidFrequency) as excinfo:
            Channel("Test", frequency)
        assert excinfo.value.frequency == frequency

    @pytest.mark.parametrize("frequency", [60.5, 54.0, "54", None, True])
    def test_non_integer_frequency_rejected(self, frequency):
        """Only whole MHz ints are accepted, even inside a band."""
        with pytest.raises(InvalidFrequency) as excinfo:
            Channel("Test", frequency)
        assert excinfo.value.frequency is frequency

    def test_invalid_frequency_is_value_error(self):
        with pytest.raises(ValueError):
            Channel("Test", 100)

    def test_name_stored_verbatim(self):
        channel = Channel("  RTP 1 HD ", 54)
        assert channel.name == "  RTP 1 HD "
        assert channel.frequency == 54

    def test_starts_not_favorite(self):
        assert Channel("RTP 1 HD", 54).favorite is False

    def test_name_and_frequency_read_only(self):
        channel = Channel("RTP 1 HD", 54)
        with pytest.raises(AttributeError):
            channel.name = "Other"
        with pytest.raises(AttributeError):
            channel.frequency = 62
        assert channel.name == "RTP 1 HD"
        assert channel.frequency == 54


class TestChannelFavorite:
    """Test favorite toggling."""

    def test_toggle_flips_flag(self):
        channel = Channel("RTP 1 HD", 54)
        channel.toggle_favorite()
        assert channel.favorite is True

    def test_toggle_twice_restores(self):
        channel = Channel("RTP 1 HD", 54)
        channel.toggle_favorite()
        channel.toggle_favorite()
        assert channel.favorite is False


class TestChannelDescribe:
    """Test display text."""

    def test_describe_contains_fields(self):
        channel = Channel("Discovery Channel HD", 470)
        text = channel.describe()
        assert "Discovery Channel HD" in text
        assert "470" in text
        assert "UHF" in text
        assert "favorite=False" in text
        assert str(channel) == text

    def test_describe_reflects_favorite(self):
        channel = Channel("RTP 1 HD", 54)
        channel.toggle_favorite()
        assert "favorite=True" in channel.describe()

    def test_equality_is_identity(self):
        """Two channels with the same fields are still distinct entries."""
        assert Channel("RTP 1 HD", 54) != Channel("RTP 1 HD", 54)
