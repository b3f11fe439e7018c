"""Protocol codecs and session state for Pixel Buds A and Huawei Band 9 wearables."""

__version__ = "0.1.0"