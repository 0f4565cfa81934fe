"""
This package contains all modules related to decoding binary messages
received from the controller.

Sub-packages handle specific data formats:

- ``header``: The 8 byte header preceding every binary message.
- ``events``: Value and text event payloads.
- ``weather``: Weather table payloads.

``message`` routes a header/payload pair to the matching decoder.
"""
