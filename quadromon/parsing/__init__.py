"""
This package contains all modules related to parsing and decoding data
received from the controller.

Sub-packages handle specific data formats:

- ``report``: Binary status report decoding and encoding.
"""
