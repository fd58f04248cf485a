from kiwis.io.json._json import dumps, loads, to_json

__all__ = ["dumps", "loads", "to_json"]
