from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar

from markov.types import Snapshot, State

if TYPE_CHECKING:
    from markov.chain.engine import Chain

C = TypeVar("C", bound="Chain")

FORMAT_NAME = "markov-chain"
FORMAT_VERSION = 1

LOGGER = logging.getLogger(__name__)


def _jsonify(obj: Any) -> Any:
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, (list, tuple)):
        return [_jsonify(v) for v in obj]

    return obj


def _hashable(obj: Any) -> Any:
    # JSON arrays come back as lists; tokens must stay hashable.
    if isinstance(obj, list):
        return tuple(_hashable(v) for v in obj)
    if isinstance(obj, dict):
        raise ValueError(f"Objects are not valid tokens: {obj!r}")
    return obj


def snapshot_to_document(snapshot: Snapshot) -> Dict[str, Any]:
    states: List[Dict[str, Any]] = []
    for state, successors in snapshot.items():
        states.append(
            {
                "state": _jsonify(state),
                "successors": [
                    {"state": _jsonify(succ), "count": count}
                    for succ, count in successors.items()
                ],
            }
        )
    return {"format": FORMAT_NAME, "version": FORMAT_VERSION, "states": states}


def document_to_snapshot(doc: Any, source: Optional[Path] = None) -> Snapshot:
    where = f" in {source}" if source is not None else ""
    if not isinstance(doc, dict) or doc.get("format") != FORMAT_NAME:
        raise ValueError(f"Not a {FORMAT_NAME} document{where}.")
    if doc.get("version") != FORMAT_VERSION:
        raise ValueError(f"Unsupported {FORMAT_NAME} version {doc.get('version')!r}{where}.")
    entries = doc.get("states")
    if not isinstance(entries, list):
        raise ValueError(f"'states' must be a list{where}.")

    snapshot: Snapshot = {}
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or "state" not in entry or not isinstance(entry.get("successors"), list):
            raise ValueError(f"Malformed state entry #{i}{where}: {entry!r}")
        state: State = _hashable(entry["state"])
        successors = snapshot.setdefault(state, {})
        for succ in entry["successors"]:
            if not isinstance(succ, dict) or "state" not in succ or "count" not in succ:
                raise ValueError(f"Malformed successor of {state!r}{where}: {succ!r}")
            successors[_hashable(succ["state"])] = succ["count"]
    return snapshot


def save_chain(path: Path, chain: "Chain") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(snapshot_to_document(chain.snapshot()), f, indent=2, sort_keys=True)
    LOGGER.debug("Saved chain with %d states to %s", len(chain), path)


def load_chain(path: Path, cls: Optional[Type[C]] = None, **kwargs: Any) -> C:
    if cls is None:
        from markov.chain.engine import Chain

        cls = Chain  # type: ignore[assignment]
    with path.open("r", encoding="utf-8") as f:
        try:
            doc = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    snapshot = document_to_snapshot(doc, source=path)
    try:
        chain = cls.from_snapshot(snapshot, **kwargs)
    except ValueError as exc:
        raise ValueError(f"Invalid chain in {path}: {exc}") from exc
    LOGGER.debug("Loaded chain with %d states from %s", len(chain), path)
    return chain
