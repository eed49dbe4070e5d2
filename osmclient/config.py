from datetime import timedelta
from importlib.metadata import PackageNotFoundError, version
from logging.config import dictConfig
from typing import Annotated, Literal

from pydantic import BeforeValidator, ByteSize, ConfigDict, PositiveInt
from pydantic_settings import SettingsConfigDict

from osmclient.lib.pydantic_settings_integration import pydantic_settings_integration


def _ByteSize(v: str) -> ByteSize:  # noqa: N802
    return ByteSize._validate(v, None)  # noqa: SLF001  # type: ignore


def _strip_validator(chars: str, /) -> BeforeValidator:
    """Create a validator that strips the given characters from the input text."""

    def validate(v):
        return str(v).strip(chars)

    return BeforeValidator(validate)


type _StripSlash = Annotated[str, _strip_validator('/')]

# -------------------- System Configuration --------------------

LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING'] | None = None

# -------------------- API Endpoints --------------------

API_URL: _StripSlash = 'https://www.openstreetmap.org/api'
API_DEV_URL: _StripSlash = 'https://master.apis.dev.openstreetmap.org/api'
OVERPASS_INTERPRETER_URLS: tuple[str, ...] = (
    'https://overpass-api.de/api/interpreter',
    'https://overpass.kumi.systems/api/interpreter',
    'https://maps.mail.ru/osm/tools/overpass/api/interpreter',
)

# -------------------- HTTP Settings --------------------

HTTP_TIMEOUT = timedelta(seconds=20)
XML_PARSE_MAX_SIZE = _ByteSize('50 MiB')  # the same as CGImap

# -------------------- Request Limits --------------------

# ids per multi-fetch request, chosen to stay under the server URL length limit
MULTI_FETCH_CHUNK_SIZE: PositiveInt = 400
NOTE_QUERY_DEFAULT_LIMIT = 100
NOTE_QUERY_DEFAULT_CLOSED = 7
OVERPASS_TIMEOUT = timedelta(seconds=25)

# Preferences
USER_PREF_KEY_MAX_LENGTH = 255
USER_PREF_VALUE_MAX_LENGTH = 255

pydantic_settings_integration(
    __name__,
    globals(),
    config=SettingsConfigDict(env_prefix='OSMCLIENT_', env_file='.env', extra='ignore'),
)

# -------------------- Constant or derived configuration --------------------

try:
    VERSION = version('osmclient')
except PackageNotFoundError:
    VERSION = 'dev'  # pyright: ignore [reportConstantRedefinition]

NAME = 'osmclient'
WEBSITE = 'https://wiki.openstreetmap.org/wiki/API_v0.6'
USER_AGENT = f'{NAME}/{VERSION} (+{WEBSITE})'

GENERATOR = f'{NAME} {VERSION}'

PYDANTIC_CONFIG = ConfigDict(
    extra='forbid',
    arbitrary_types_allowed=True,
    allow_inf_nan=False,
    strict=True,
    cache_strings='keys',
)

# -------------------- Logging configuration --------------------

# logging is configured only when LOG_LEVEL is set
if LOG_LEVEL is not None:
    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'default': {
                'formatter': 'default',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            'root': {'handlers': ['default'], 'level': LOG_LEVEL},
            **{
                # reduce logging verbosity of some modules
                module: {'handlers': [], 'level': 'INFO'}
                for module in (
                    'hpack',
                    'httpx',
                    'httpcore',
                )
            },
        },
    })
