from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'tiles': 0,
        'walls_vertical': 0,
        'walls_horizontal': 0,
        'open_edges': 0,
        'largest_tile': 0,
        'smallest_tile': 0,
        'isolated_tiles': 0,
        'neighbor_links': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
