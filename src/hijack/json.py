''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`.
'''

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available. orjson
# is a declared dependency; msgspec is preferred when it is also installed.

msgspec = None
orjson = None

try:
    import msgspec.json
except ImportError:
    import orjson


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. Message
# bodies are bytes, so there is no conversion needed in either direction.

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
    EncodeError = (msgspec.EncodeError, TypeError)
else:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
    EncodeError = orjson.JSONEncodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
