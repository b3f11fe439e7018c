"""Huawei Band 9 transport framing, TLV payloads, crypto and auth helpers, device records and request routing."""