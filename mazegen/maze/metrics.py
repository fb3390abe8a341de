from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms': 0,
        'interior_walls': 0,
        'border_walls': 0,
        'walls_present': 0,
        'walls_absent': 0,
        'carve_iterations': 0,
        'diameter': 0,
        'runtime_ms': 0.0,
    }
