"""Per-method settings read from a gRPC service config in JSON form."""

import json
from dataclasses import dataclass, field

from google.protobuf import duration_pb2

_MAX_DURATION_SECONDS = 315_576_000_000
_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MILLI = 1_000_000
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT32_MAX = 2**32 - 1

_CODE_NAMES = (
    "OK",
    "CANCELLED",
    "UNKNOWN",
    "INVALID_ARGUMENT",
    "DEADLINE_EXCEEDED",
    "NOT_FOUND",
    "ALREADY_EXISTS",
    "PERMISSION_DENIED",
    "RESOURCE_EXHAUSTED",
    "FAILED_PRECONDITION",
    "ABORTED",
    "OUT_OF_RANGE",
    "UNIMPLEMENTED",
    "INTERNAL",
    "UNAVAILABLE",
    "DATA_LOSS",
    "UNAUTHENTICATED",
)


@dataclass
class RetryPolicy:
    """Retry settings of a method config; status codes are held by name."""

    max_attempts: int = 0
    initial_backoff: duration_pb2.Duration = None
    max_backoff: duration_pb2.Duration = None
    backoff_multiplier: float = 0.0
    retryable_status_codes: tuple = ()


def parse_duration(text):
    """Parse a JSON duration such as "1.5s" into a Duration message."""
    if not isinstance(text, str):
        raise ValueError(f"duration must be a string, got {text!r}")
    duration = duration_pb2.Duration()
    try:
        duration.FromJsonString(text)
    except ValueError as exc:
        raise ValueError(f"invalid duration {text!r}: {exc}") from exc
    return duration


def to_millis(duration):
    """Return ``duration`` in whole milliseconds, truncated toward zero.

    Raises ValueError if the duration is out of range or malformed.
    """
    seconds, nanos = duration.seconds, duration.nanos
    if not -_MAX_DURATION_SECONDS <= seconds <= _MAX_DURATION_SECONDS:
        raise ValueError(f"duration ({seconds}s) out of range")
    if not -_NANOS_PER_SECOND < nanos < _NANOS_PER_SECOND:
        raise ValueError(f"duration nanos ({nanos}) out of range")
    if (seconds > 0 and nanos < 0) or (seconds < 0 and nanos > 0):
        raise ValueError("duration seconds and nanos have different signs")
    total = seconds * _NANOS_PER_SECOND + nanos
    total = max(_INT64_MIN, min(_INT64_MAX, total))
    millis = abs(total) // _NANOS_PER_MILLI
    return -millis if total < 0 else millis


def _field(obj, json_name, proto_name):
    if json_name in obj:
        return obj[json_name]
    return obj.get(proto_name)


def _object(value, what):
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object")
    return value


def _array(value, what):
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a JSON array")
    return value


def _uint32(value, what):
    if isinstance(value, bool):
        raise ValueError(f"{what} must be a number")
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            raise ValueError(f"{what} must be a number, got {value!r}") from None
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{what} must be an integer, got {value!r}")
        value = int(value)
    elif not isinstance(value, int):
        raise ValueError(f"{what} must be a number, got {value!r}")
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{what} out of range: {value}")
    return value


def _wrapped_uint32(value, what):
    if isinstance(value, dict):
        value = value.get("value", 0)
    return _uint32(value, what)


def _status_code(value):
    if isinstance(value, str) and value in _CODE_NAMES:
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < len(_CODE_NAMES):
            return _CODE_NAMES[value]
    raise ValueError(f"invalid status code {value!r}")


def _retry_policy(doc):
    doc = _object(doc, "retryPolicy")
    max_attempts = _field(doc, "maxAttempts", "max_attempts")
    initial = _field(doc, "initialBackoff", "initial_backoff")
    maximum = _field(doc, "maxBackoff", "max_backoff")
    multiplier = _field(doc, "backoffMultiplier", "backoff_multiplier")
    codes = _field(doc, "retryableStatusCodes", "retryable_status_codes")
    if multiplier is not None and (
        isinstance(multiplier, bool) or not isinstance(multiplier, (int, float))
    ):
        raise ValueError(f"backoffMultiplier must be a number, got {multiplier!r}")
    return RetryPolicy(
        max_attempts=0 if max_attempts is None else _uint32(max_attempts, "maxAttempts"),
        initial_backoff=None if initial is None else parse_duration(initial),
        max_backoff=None if maximum is None else parse_duration(maximum),
        backoff_multiplier=0.0 if multiplier is None else float(multiplier),
        retryable_status_codes=tuple(
            _status_code(c) for c in _array(codes, "retryableStatusCodes")
        ),
    )


def _lookup(table, service, method):
    key = f"{service}.{method}"
    if key in table:
        return table[key]
    return table.get(service)


@dataclass
class ServiceConfig:
    """Settings from a gRPC service config, keyed by service or "service.method".

    Lookups favour a method-level entry over a service-level one and return
    None when neither is present.
    """

    policies: dict = field(default_factory=dict)
    timeouts: dict = field(default_factory=dict)
    request_limits: dict = field(default_factory=dict)
    response_limits: dict = field(default_factory=dict)

    @classmethod
    def load(cls, stream):
        """Read a JSON service config from a text or binary stream."""
        data = stream.read()
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        return cls.from_json(data)

    @classmethod
    def from_json(cls, text):
        """Parse a JSON service config; raise ValueError if it is malformed."""
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid service config: {exc}") from exc
        doc = _object(doc, "service config")

        config = cls()
        method_configs = _field(doc, "methodConfig", "method_config")
        for mc in _array(method_configs, "methodConfig"):
            mc = _object(mc, "methodConfig entry")

            policy_doc = _field(mc, "retryPolicy", "retry_policy")
            policy = None if policy_doc is None else _retry_policy(policy_doc)

            req = _field(mc, "maxRequestMessageBytes", "max_request_message_bytes")
            res = _field(mc, "maxResponseMessageBytes", "max_response_message_bytes")
            req = None if req is None else _wrapped_uint32(req, "maxRequestMessageBytes")
            res = None if res is None else _wrapped_uint32(res, "maxResponseMessageBytes")

            timeout_text = mc.get("timeout")
            timeout = None if timeout_text is None else parse_duration(timeout_text)

            for name in _array(mc.get("name"), "name"):
                name = _object(name, "name entry")
                key = name.get("service", "")
                method = name.get("method", "")
                if method:
                    key = f"{key}.{method}"

                config.policies[key] = policy
                if req is not None:
                    config.request_limits[key] = req
                if res is not None:
                    config.response_limits[key] = res
                if timeout is not None:
                    config.timeouts[key] = timeout
        return config

    def retry_policy(self, service, method):
        """Return the retry policy for a method, or None."""
        return _lookup(self.policies, service, method)

    def timeout(self, service, method):
        """Return the timeout of a method in milliseconds, or None."""
        duration = _lookup(self.timeouts, service, method)
        return None if duration is None else to_millis(duration)

    def request_limit(self, service, method):
        """Return the request size limit of a method in bytes, or None."""
        return _lookup(self.request_limits, service, method)

    def response_limit(self, service, method):
        """Return the response size limit of a method in bytes, or None."""
        return _lookup(self.response_limits, service, method)