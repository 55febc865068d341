import json
from typing import Dict, Tuple


FORMATS = ("txt", "json", "csv", "tsv", "ndjson")

_MIME = {
    "txt": "text/plain",
    "json": "application/json",
    "csv": "text/csv",
    "tsv": "text/tab-separated-values",
    "ndjson": "application/x-ndjson",
}


def _record_json(meta: Dict, digits: str) -> str:
    record = dict(meta)
    record["value"] = digits
    return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


def _record_table(meta: Dict, digits: str, sep: str) -> str:
    # one header line and one row; columns follow the order of meta
    header = [str(k) for k in meta] + ["value"]
    row = [str(v) for v in meta.values()] + [digits]
    return sep.join(header) + "\n" + sep.join(row) + "\n"


def serialize_digits(digits: str, fmt: str, meta: Dict) -> Tuple[bytes, str]:
    fmt = fmt.lower().strip()
    if fmt not in _MIME:
        raise ValueError("unsupported format")
    if fmt == "txt":
        out = digits + "\n"
    elif fmt == "json":
        out = _record_json(meta, digits)
    elif fmt == "ndjson":
        out = _record_json(meta, digits) + "\n"
    else:
        out = _record_table(meta, digits, "," if fmt == "csv" else "\t")
    return out.encode("utf-8"), _MIME[fmt]
