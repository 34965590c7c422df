"""Protocol constants.

Keep these in one place to avoid stringly-typed request handling.
"""

PROTOCOL_VERSION = "WTTP/2.0"

# Method names passed to the transport.
GET = "GET"
HEAD = "HEAD"
PUT = "PUT"
PATCH = "PATCH"

READ_METHODS = frozenset((GET, HEAD))
WRITE_METHODS = frozenset((PUT, PATCH))

# Bit positions in the HeaderInfo.methods bitmask.
METHOD_BITS = {
    "GET": 0,
    "POST": 1,
    "PUT": 2,
    "DELETE": 3,
    "PATCH": 4,
    "HEAD": 5,
    "OPTIONS": 6,
    "CONNECT": 7,
    "TRACE": 8,
    "LOCATE": 9,
    "DEFINE": 10,
}


# MIME type tokens, with their two-byte codes and traditional names.

MIME_TYPES = {
    "TEXT_PLAIN": "0x7470",
    "TEXT_HTML": "0x7468",
    "TEXT_CSS": "0x7463",
    "TEXT_JAVASCRIPT": "0x7473",
    "TEXT_MARKDOWN": "0x746D",
    "TEXT_XML": "0x7478",
    "TEXT_CSV": "0x7467",
    "TEXT_CALENDAR": "0x7443",

    "APPLICATION_JSON": "0x786A",
    "APPLICATION_XML": "0x7878",
    "APPLICATION_PDF": "0x7870",
    "APPLICATION_ZIP": "0x787A",
    "APPLICATION_OCTET_STREAM": "0x786F",
    "APPLICATION_FORM_URLENCODED": "0x7877",
    "APPLICATION_MS_EXCEL": "0x7865",
    "APPLICATION_XLSX": "0x7866",

    "IMAGE_PNG": "0x6970",
    "IMAGE_JPEG": "0x696A",
    "IMAGE_GIF": "0x6967",
    "IMAGE_WEBP": "0x6977",
    "IMAGE_SVG": "0x6973",
    "IMAGE_BMP": "0x6962",
    "IMAGE_TIFF": "0x6974",
    "IMAGE_ICO": "0x6969",

    "AUDIO_MPEG": "0x616D",
    "AUDIO_WAV": "0x6177",
    "AUDIO_OGG": "0x616F",

    "VIDEO_MP4": "0x766D",
    "VIDEO_WEBM": "0x7677",
    "VIDEO_OGG": "0x766F",

    "MULTIPART_FORM_DATA": "0x7066",
    "MULTIPART_BYTERANGES": "0x7062",
}

MIME_TYPE_STRINGS = {
    "text/plain": "TEXT_PLAIN",
    "text/html": "TEXT_HTML",
    "text/css": "TEXT_CSS",
    "text/javascript": "TEXT_JAVASCRIPT",
    "text/markdown": "TEXT_MARKDOWN",
    "text/xml": "TEXT_XML",
    "text/csv": "TEXT_CSV",
    "text/calendar": "TEXT_CALENDAR",

    "application/json": "APPLICATION_JSON",
    "application/xml": "APPLICATION_XML",
    "application/pdf": "APPLICATION_PDF",
    "application/zip": "APPLICATION_ZIP",
    "application/octet-stream": "APPLICATION_OCTET_STREAM",
    "application/x-www-form-urlencoded": "APPLICATION_FORM_URLENCODED",
    "application/vnd.ms-excel": "APPLICATION_MS_EXCEL",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "APPLICATION_XLSX",

    "image/png": "IMAGE_PNG",
    "image/jpeg": "IMAGE_JPEG",
    "image/gif": "IMAGE_GIF",
    "image/webp": "IMAGE_WEBP",
    "image/svg+xml": "IMAGE_SVG",
    "image/bmp": "IMAGE_BMP",
    "image/tiff": "IMAGE_TIFF",
    "image/x-icon": "IMAGE_ICO",

    "audio/mpeg": "AUDIO_MPEG",
    "audio/wav": "AUDIO_WAV",
    "audio/ogg": "AUDIO_OGG",

    "video/mp4": "VIDEO_MP4",
    "video/webm": "VIDEO_WEBM",
    "video/ogg": "VIDEO_OGG",

    "multipart/form-data": "MULTIPART_FORM_DATA",
    "multipart/byteranges": "MULTIPART_BYTERANGES",
}

MIME_STRINGS = dict((token, name) for name, token in MIME_TYPE_STRINGS.items())

# Only these MIME tokens are ever decoded to text. This is a closed set:
# no prefix or wildcard matching.
TEXT_MIME_TYPES = frozenset((
    "TEXT_PLAIN",
    "TEXT_HTML",
    "TEXT_CSS",
    "TEXT_JAVASCRIPT",
    "TEXT_XML",
    "APPLICATION_JSON",
    "APPLICATION_XML",
))


# Charset tokens. The codec column is the Python codec used to turn a
# body into text; the binary-to-text encodings are ASCII on the wire.

CHARSET_TYPES = {
    "UTF_8": "0x7508",
    "UTF_16": "0x7516",
    "UTF_32": "0x7532",
    "UTF_32BE": "0x7533",
    "BASE64": "0x6264",
    "BASE64URL": "0x6265",
    "BASE58": "0x6258",
    "BASE32": "0x6232",
    "HEX": "0x6216",
    "ASCII": "0x6173",
    "ISO_8859_1": "0x6973",
    "LATIN1": "0x6C31",
    "UTF_7": "0x7507",
    "UCS_2": "0x7563",
}

CHARSET_CODECS = {
    "UTF_8": "utf-8",
    "UTF_16": "utf-16",
    "UTF_32": "utf-32",
    "UTF_32BE": "utf-32-be",
    "BASE64": "ascii",
    "BASE64URL": "ascii",
    "BASE58": "ascii",
    "BASE32": "ascii",
    "HEX": "ascii",
    "ASCII": "ascii",
    "ISO_8859_1": "iso-8859-1",
    "LATIN1": "latin-1",
    "UTF_7": "utf-7",
    "UCS_2": "utf-16-le",
}

CHARSET_STRINGS = {
    "utf-8": "UTF_8",
    "utf-16": "UTF_16",
    "utf-32": "UTF_32",
    "utf-32be": "UTF_32BE",
    "base64": "BASE64",
    "base64url": "BASE64URL",
    "base58": "BASE58",
    "base32": "BASE32",
    "hex": "HEX",
    "ascii": "ASCII",
    "iso-8859-1": "ISO_8859_1",
    "latin1": "LATIN1",
    "utf-7": "UTF_7",
    "ucs-2": "UCS_2",
}

CHARSET_NAMES = dict((token, name) for name, token in CHARSET_STRINGS.items())

# The zero code marks an unset charset.
CHARSET_UNSET = ("", "0x0000")


# Storage location tokens.

LOCATION_TYPES = {
    "DATAPOINT_CHUNK": "0x0101",
    "DATAPOINT_COLLECTION": "0x0102",
    "DATAPOINT_FILE": "0x0103",
    "DATAPOINT_DIRECTORY": "0x0104",
    "DATAPOINT_LINK": "0x0105",
    "HTTP_URL": "0x0201",
    "HTTP_SECURE_URL": "0x0202",
    "IPFS_FILE_ID": "0x0303",
    "IPFS_DIRECTORY_ID": "0x0304",
    "ARWEAVE_FILE_ID": "0x0403",
    "ARWEAVE_DIRECTORY_ID": "0x0404",
    "ORDINALS_CHUNK_ID": "0x0501",
    "ORDINALS_COLLECTION_ID": "0x0502",
    "ORDINALS_FILE_ID": "0x0503",
    "ORDINALS_DIRECTORY_ID": "0x0504",
    "ICP_LINK": "0x0605",
}

# PUT always stores content as chunked data points.
DATAPOINT_CHUNK = "DATAPOINT_CHUNK"


# Language tokens for the Accept-Language request header.

LANGUAGE_TYPES = {
    "EN_US": "0x656E",
    "EN_GB": "0x6567",
    "ZH_CN": "0x7A68",
    "ZH_TW": "0x7A74",
    "JA_JP": "0x6A61",
    "KO_KR": "0x6B6F",
    "FR_FR": "0x6672",
    "DE_DE": "0x6465",
    "ES_ES": "0x6573",
    "IT_IT": "0x6974",
    "PT_PT": "0x7074",
    "RU_RU": "0x7275",
}

# Keys are lower case; lookups must lower() the incoming tag first.
LANGUAGE_STRINGS = dict((name.replace('_', '-').lower(), name) for name in LANGUAGE_TYPES)


# Defaults applied when the caller does not say otherwise.

DEFAULT_MIME_TYPE = "TEXT_PLAIN"
DEFAULT_CHARSET = "UTF_8"

SUCCESS_CODES = frozenset((200, 206))

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
