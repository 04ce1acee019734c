"""
Logging utilities for the deadly-embrace resolver.
"""

import logging
from collections import Counter
from typing import Dict, Any, Iterable, List, Optional

def get_logger(name: str):
    """Get a logger for the given module."""
    return logging.getLogger(name)

def log_resolution_step(step: str, status: str, metadata: Optional[Dict[str, Any]] = None):
    """Log a resolution step with structured data."""
    logger = get_logger("deadlyembrace.resolution")
    log_data = {"step": step, "status": status, "metadata": metadata or {}}
    level = logging.INFO if status in ["started", "completed"] else logging.ERROR
    logger.log(level, f"Resolution {step}: {status}", extra=log_data)

def log_export_plan(identity_basis: str, entries: Iterable[Any], anomalies: List[str]):
    """
    Log a planned export set: one DEBUG record per entry, then an INFO
    summary whose ``metadata["anomalies"]`` counts each anomaly code.
    """
    logger = get_logger("deadlyembrace.plan")
    count = 0
    for entry in entries:
        count += 1
        logger.debug(
            f"Planned {entry.property_name} -> {entry.export_name} as {entry.output_id}",
            extra={"step": "plan", "status": "entry", "metadata": entry.to_dict()},
        )

    counts = dict(Counter(anomalies))
    logger.info(
        f"Export plan for {identity_basis}: {count} entries, anomalies: {counts or 'none'}",
        extra={
            "step": "plan",
            "status": "planned",
            "metadata": {"identity_basis": identity_basis, "count": count, "anomalies": counts},
        },
    )
