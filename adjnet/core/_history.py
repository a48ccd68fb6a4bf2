import inspect
import json
import time
from datetime import UTC, datetime
from functools import wraps

import numpy as np
import polars as pl


class GraphDiff:
    """Represents the difference between two graph states.

    Attributes
    ----------
    nodes_added : set
        Nodes in b but not in a
    nodes_removed : set
        Nodes in a but not in b
    edges_added : set
        Edge keys in b but not in a
    edges_removed : set
        Edge keys in a but not in b

    """

    def __init__(self, snapshot_a, snapshot_b):
        self.snapshot_a = snapshot_a
        self.snapshot_b = snapshot_b

        self.nodes_added = snapshot_b["node_ids"] - snapshot_a["node_ids"]
        self.nodes_removed = snapshot_a["node_ids"] - snapshot_b["node_ids"]
        self.edges_added = snapshot_b["edge_ids"] - snapshot_a["edge_ids"]
        self.edges_removed = snapshot_a["edge_ids"] - snapshot_b["edge_ids"]

    def summary(self):
        """Human-readable summary of differences."""
        lines = [
            f"Diff: {self.snapshot_a['label']} → {self.snapshot_b['label']}",
            "",
            f"Nodes: {len(self.nodes_added):+d} added, {len(self.nodes_removed)} removed",
            f"Edges: {len(self.edges_added):+d} added, {len(self.edges_removed)} removed",
        ]
        return "\n".join(lines)

    def is_empty(self):
        """Check if there are no differences."""
        return (
            not self.nodes_added
            and not self.nodes_removed
            and not self.edges_added
            and not self.edges_removed
        )

    def __repr__(self):
        return self.summary()

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {
            "snapshot_a": self.snapshot_a["label"],
            "snapshot_b": self.snapshot_b["label"],
            "nodes_added": list(self.nodes_added),
            "nodes_removed": list(self.nodes_removed),
            "edges_added": list(self.edges_added),
            "edges_removed": list(self.edges_removed),
        }


def _edge_key(directed, source, target):
    # undirected edges compare equal whichever endpoint was stored first
    if directed or repr(source) <= repr(target):
        return (source, target)
    return (target, source)


class HistoryMixin:
    """Mutation history and snapshots for ``Graph``.

    Expects the host to define ``_history``, ``_history_enabled``,
    ``_event_seq``, ``_history_clock0`` and ``_snapshots`` before
    ``_install_history_hooks`` is called.
    """

    # Mutating methods to wrap. Add here if you add new mutators.
    _HISTORY_OPS = (
        "add_node",
        "add_edge",
        "remove_node",
        "remove_edge",
        "set_weight",
        "clear",
        "freeze",
        "copy",
        "reverse",
    )

    # History and Timeline

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, (set, frozenset)):
            return sorted((self._jsonify(v) for v in x), key=str)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        if isinstance(x, np.generic):
            return x.item()
        # graphs and other heavy objects -> just a tag
        return f"<<{type(x).__name__}>>"

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        self._event_seq += 1
        evt = {
            "version": self._event_seq,
            "ts_utc": self._utcnow_iso(),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                payload = dict(bound.arguments)
                payload["result"] = result
                self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        for name in self._HISTORY_OPS:
            fn = getattr(self, name)
            # bound methods are wrapped once per instance
            if getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    # The hooks close over this instance; copies and pickles get their own.

    def __getstate__(self):
        state = self.__dict__.copy()
        for name in self._HISTORY_OPS:
            state.pop(name, None)
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._install_history_hooks()

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DataFrame; otherwise return a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes 'version', 'ts_utc' (UTC ISO-8601), 'mono_ns'
            (monotonic nanoseconds since the graph was created), 'op', the call
            arguments and 'result'.

        Notes
        -----
        Ordering is guaranteed by 'version' and 'mono_ns'. The log is in-memory until exported
        and grows with every mutation unless the graph was built with ``history_limit``,
        in which case only the newest events are kept ('version' keeps counting).
        As a DataFrame, columns missing from an event are null; node ids of
        mixed types across events cannot share a column.

        """
        if as_df:
            return pl.from_dicts(list(self._history), infer_schema_length=None)
        return list(self._history)

    def export_history(self, path: str):
        """Write the mutation history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: '.parquet', '.ndjson' (a.k.a. '.jsonl'),
            '.json', '.csv'. Unknown extensions default to Parquet by appending '.parquet'.

        Returns
        -------
        int
            Number of events written. Returns 0 if the history is empty.

        Raises
        ------
        OSError
            If the file cannot be written.

        """
        if not self._history:
            return 0
        p = str(path).lower()
        if p.endswith(".ndjson") or p.endswith(".jsonl"):
            with open(path, "w", encoding="utf-8") as f:
                for evt in self._history:
                    f.write(json.dumps(evt, ensure_ascii=False) + "\n")
            return len(self._history)
        if p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(list(self._history), f, ensure_ascii=False)
            return len(self._history)

        df = self.history(as_df=True)
        if p.endswith(".csv"):
            df.write_csv(path)
        elif p.endswith(".parquet"):
            df.write_parquet(path)
        else:
            df.write_parquet(f"{path}.parquet")
        return len(df)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log (exported files are untouched)."""
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker event (``op='mark'``) into the history.

        Logging must be enabled for the marker to be recorded.
        """
        self._log_event("mark", label=label)

    # Audit

    def _state(self, label):
        directed = self.is_directed
        return {
            "label": label,
            "version": self._edge_version,
            "node_ids": set(self._adj),
            "edge_ids": {_edge_key(directed, e.source, e.target) for e in self.get_edges()},
        }

    def snapshot(self, label=None):
        """Create a named snapshot of current graph state.

        Parameters
        ----------
        label : str, optional
            Human-readable label for snapshot (auto-generated if None)

        Returns
        -------
        dict
            Snapshot with 'label', 'version', 'timestamp', 'counts',
            'node_ids' and 'edge_ids'.

        """
        if label is None:
            label = f"snapshot_{len(self._snapshots)}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        snapshot = self._state(label)
        snapshot["timestamp"] = datetime.now(UTC).isoformat()
        snapshot["counts"] = {
            "nodes": self.get_node_count(),
            "edges": self.get_edge_count(),
        }
        self._snapshots.append(snapshot)
        return snapshot

    def diff(self, a, b=None):
        """Compare two snapshots or compare snapshot with current state.

        Parameters
        ----------
        a : str | dict | Graph
            First snapshot (label, snapshot dict, or Graph instance)
        b : str | dict | Graph | None
            Second snapshot. If None, compare with current state.

        Returns
        -------
        GraphDiff

        """
        snap_a = self._resolve_snapshot(a)
        snap_b = self._resolve_snapshot(b) if b is not None else self._state("current")
        return GraphDiff(snap_a, snap_b)

    def _resolve_snapshot(self, ref):
        """Resolve snapshot reference (label, dict, or Graph)."""
        if isinstance(ref, dict):
            return ref
        if isinstance(ref, str):
            for snap in self._snapshots:
                if snap["label"] == ref:
                    return snap
            raise ValueError(f"Snapshot '{ref}' not found")
        if isinstance(ref, HistoryMixin):
            return ref._state("external")
        raise TypeError(f"Invalid snapshot reference: {type(ref)}")

    def list_snapshots(self):
        """List snapshot metadata (label, timestamp, version, counts)."""
        return [
            {
                "label": snap["label"],
                "timestamp": snap["timestamp"],
                "version": snap["version"],
                "counts": snap["counts"],
            }
            for snap in self._snapshots
        ]
