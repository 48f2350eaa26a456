"""Error, warning and notice annotations for the detected CI provider."""

from ci_group.dialect import Dialect, detect, sanitize

# GitHub annotation property -> Azure logissue property
_AZURE_PROPERTIES = {
    "file": "sourcepath",
    "line": "linenumber",
    "col": "columnnumber",
}

_GITHUB_PROPERTY_ESCAPES = str.maketrans({
    "%": "%25",
    "\r": "%0D",
    "\n": "%0A",
    ":": "%3A",
    ",": "%2C",
})

_AZURE_PROPERTY_ESCAPES = str.maketrans({
    "%": "%AZP25",
    "\r": "%0D",
    "\n": "%0A",
    ";": "%3B",
    "]": "%5D",
})


def _annotate(level: str, message: str, properties: dict) -> None:
    message = sanitize(message)
    dialect = detect()
    if dialect is Dialect.GITHUB_ACTIONS:
        parts = ",".join(f"{k}={str(v).translate(_GITHUB_PROPERTY_ESCAPES)}" for k, v in properties.items())
        prefix = f"::{level} {parts}" if parts else f"::{level}"
        print(f"{prefix}::{message}", flush=True)
    elif dialect is Dialect.AZURE_PIPELINES:
        if level == "notice":
            print(f"##[section]{message}", flush=True)
            return
        parts = [f"type={level}"]
        parts += [
            f"{_AZURE_PROPERTIES.get(k, k)}={str(v).translate(_AZURE_PROPERTY_ESCAPES)}"
            for k, v in properties.items()
        ]
        print(f"##vso[task.logissue {';'.join(parts)}]{message}", flush=True)
    else:
        print(f"{level.capitalize()}: {message}", flush=True)


def error(message: str, **kwargs) -> None:
    _annotate("error", message, kwargs)


def warning(message: str, **kwargs) -> None:
    _annotate("warning", message, kwargs)


def notice(message: str, **kwargs) -> None:
    _annotate("notice", message, kwargs)
