"""Pixel Buds A Maestro framing, RFCOMM reassembly, channel parsers and session state."""