# wearlink

Pure-Python codecs and session state for two families of wearables:

* **Pixel Buds A** (`wearlink.maestro`) — the Maestro protocol carried
  over RFCOMM: frame encoding and parsing, stream reassembly, a minimal
  protobuf wire-format decoder, parsers for the handshake, battery and
  gesture, connection state, keepalive, wear and touch, settings and
  status channels, and a session object that turns incoming frames into
  typed events.
* **Huawei Band 9** (`wearlink.huawei`) — the BLE transport: sliced
  frames with CRC-16 checks, TLV payloads, the authentication crypto
  helpers, auth reply parsing, device-information records, and a router
  that matches replies to pending requests and broadcasts the rest.

## Requirements

Python 3.10 or later. The only runtime dependency is `cryptography`.
Install the `test` extra for `pytest` and `pytest-asyncio`.

## What the package does not do

wearlink does not talk to Bluetooth hardware. It opens no adapters,
discovers no GATT services and makes no RFCOMM or BLE connections; you
feed it the bytes your own transport receives and send the bytes it
produces. There is no Huawei session object that runs the
authentication exchange or the bootstrap requests end to end: the
package supplies the framing, TLV, crypto and parsing pieces such an
exchange is built from. There is no command-line tool.

## Maestro frames

```python
from wearlink.maestro.frame import encode_frame, parse_frame

raw = encode_frame(0x03, 10, 0, b"\x01\x02\x03")
frame, consumed = parse_frame(raw)
assert consumed == len(raw)
assert frame.channel == 10 and frame.payload == b"\x01\x02\x03"
```

A payload of exactly one byte is encoded in the compact three-byte form
`type, channel, byte`; anything else is `type, channel, flags, length`
followed by the payload. `parse_frame` returns `(MaestroFrame, consumed)`
or `None` when the buffer does not yet hold a whole frame. `FrameType`
names the known frame-type bytes and `ChannelState` the lifecycle of a
logical channel (`CLOSED`, `OPEN_SENT`, `OPEN`).

For a byte stream that arrives in pieces, `wearlink.maestro.rfcomm.Reassembler`
buffers the bytes and returns every complete frame:

```python
from wearlink.maestro.rfcomm import Reassembler

reassembler = Reassembler()
frames = reassembler.push(b"\x03\x0a\x00")   # one compact frame
frames += reassembler.push(b"\x03\x0a\x00\x02")  # header only, waits for more
```

The same module has `RfcommDescriptor` (a server channel and its DLCI,
twice the channel capped at 255), `discover_maestro_descriptor()`, which
returns the descriptor for server channel 13, and `connect_maestro(descriptor)`,
which raises `ValueError` for a DLCI of 0 and otherwise returns the
descriptor.

## Maestro session

`wearlink.maestro.session.PixelBudsASession` keeps channel, handshake,
connection, ear and settings state and publishes `MaestroEvent` values
(a `MaestroEventKind` and a value) for every frame it ingests:

```python
from wearlink.maestro.frame import MaestroFrame
from wearlink.maestro.session import MaestroEventKind, PixelBudsASession

session = PixelBudsASession("00:00:00:00:00:00")
events = session.events()

outgoing = session.build_handshake_frames()   # channel 2 init + opens for 5..11
ping = session.next_keepalive_frame()         # next ping on channel 8
toggle = session.set_in_ear_detection(True)   # settings write on channel 10

session.ingest_frame(MaestroFrame(0x05, 3, 0, b"\xe4\x50\xff"))
for event in events.drain():
    if event.kind is MaestroEventKind.BATTERY:
        print(event.value.bud_percent)
```

Every ingested frame first produces a `FRAME` event. Depending on type
and channel it then produces `HANDSHAKE`, `BATTERY`, `CONNECTION_STATE`,
`WEAR_TOUCH`, `GESTURE`, `SETTING` or `STATUS` events and updates
`handshake`, `channels`, `connection_state`, `last_ear_state` and
`settings`. A receiver from `events()` only sees events emitted after it
was created, holds at most 128 (dropping the oldest and counting them
in `missed`), and is held weakly by the session, so keep a reference to
it. `MaestroConfig` carries an adapter name and a keepalive interval in
seconds (2.0 by default) for use by the caller.

## Maestro channel parsers

Each channel parser can be used on its own:

* `wearlink.maestro.handshake` — `build_init_payload(timestamp_ms, tz_offset_minutes)`
  and `parse_ack_payload(payload, state)`, which fills a `HandshakeState`
  (model, sample rate, bit depth, or a six-byte capability bitmap).
* `wearlink.maestro.control` — `parse_battery(payload, last_ear_state)`
  returning a `BatteryUpdate`, and `GestureClassifier` with
  `note_ch3_payload` and `classify_from_discriminator`, yielding a
  `GestureEvent`.
* `wearlink.maestro.conn_state` — `parse_connection_state(payload)`
  returning a `ConnectionState`; unlisted codes become `UNKNOWN_<code>`
  members whose `known` property is false.
* `wearlink.maestro.keepalive` — `KeepaliveState.next_ping()` and
  `is_pong(payload)`.
* `wearlink.maestro.wear_touch` — `parse_wear_touch(payload)` returning
  a list of `LidEvent`, `EarEvent`, `TouchInput`, `GestureComplete` and
  `PrimaryBud` values.
* `wearlink.maestro.settings` — `parse_snapshot(payload)` returning a
  `SettingSnapshot`, and `build_toggle(setting, value)`. `SettingId`
  members are keyed by wire tag; unlisted tags become `UNKNOWN_0x..`.
* `wearlink.maestro.status` — `parse_status(payload)` returning a
  `DeviceStatus`.
* `wearlink.maestro.protobuf` — `decode_fields`, `decode_varint`,
  `encode_varint` and `encode_varint_field`; malformed input raises
  `ProtoError`.

## Huawei TLV payloads

```python
from wearlink.huawei.tlv import Tlv

tlv = Tlv()
tlv.push_u8(1, 2)
tlv.push_u16(2, 3)

decoded = Tlv.decode(tlv.encode())
assert decoded.get_u8(1) == 2
assert decoded.get_u16(2) == 3
```

A tag may hold several values; `get_first` returns the first. Getters
return `None` when a tag is missing or its value is too short, and
`Tlv.decode` raises `TlvError` on truncated input. Iterating a `Tlv`
yields `(tag, value)` pairs in ascending tag order, which is also the
encoding order.

## Huawei transport frames

```python
from wearlink.huawei.frame import SliceReassembler, TransportFrame, encode_frame, parse_stream

frame = TransportFrame(service_id=1, command_id=8, payload=b"\x01\x02\x03")
buf = bytearray()
for piece in encode_frame(frame, 64):
    buf += piece.data

assert parse_stream(buf, SliceReassembler()) == [frame]
```

`encode_frame(frame, slice_size)` returns `EncodedSlice` values (a
`SliceKind`, an index and the packet bytes), splitting the frame when it
does not fit. `parse_stream` removes complete packets from the
`bytearray` it is given and returns the frames they finish. Malformed
input raises a subclass of `FrameError`: `BadMagic`, `BadCrc`,
`Truncated` or `MissingSliceHeader`. `crc16` is the CRC-16/IBM-SDLC
checksum used on each packet.

## Routing replies

`wearlink.huawei.router.Router` sends each decoded frame either to a
waiting request or to its subscribers:

```python
import asyncio
from wearlink.huawei.frame import TransportFrame
from wearlink.huawei.router import Router

async def demo():
    router = Router()
    updates = router.subscribe()
    reply = await router.register(1, 8)
    await router.route(TransportFrame(1, 8, b"ok"))
    await router.route(TransportFrame(1, 9, b"async"))
    return await reply, await updates.recv()

asyncio.run(demo())
```

`register(service_id, command_id)` returns a future completed by the
next matching frame; registering the same key again cancels the earlier
future. Frames nobody waits for go to every live subscription, which
holds at most 128 frames (dropping the oldest and counting them in
`missed`) and can be read with `recv()` or `async for`. Subscriptions
are held weakly, so keep a reference. `PendingRequests` is the waiting
table on its own.

## Authentication helpers

`wearlink.huawei.crypto` provides `create_secret_key(device_mac)`,
`digest_challenge(auth_version, key, nonce, auth_algo)`,
`encrypt_bond_key` and `decrypt_pin_code` (AES-128-GCM for method 1,
AES-128-CBC with PKCS#7 otherwise; bad input raises `ValueError`), and
`derive_hichain_session_key(psk, rand_self, rand_peer, info)` (HKDF-SHA256).

`wearlink.huawei.auth` chooses an `AuthFlow` from the device's support
type with `select_auth_flow`, and reads the negotiation and bond replies
from a `Tlv` with `parse_security_negotiation` and `parse_bond_params`.

## Device information

`wearlink.huawei.device_info` holds the records a band reports:
`SupportedServices` (with `contains` and `in`), `SupportedCommands`
(with `supports(service_id, command_id)`), `ExpandCapabilities`,
`ProductInfo`, `BatteryStatus`, and the event records `CapabilityBytes`
and `RawEvent`.

## Capture

`wearlink.capture.FrameLog` records a frame with its direction,
characteristic, raw bytes, a free-form detail string and the time in
milliseconds since the epoch at which it was created, for building
traffic logs.