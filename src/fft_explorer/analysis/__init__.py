from fft_explorer.analysis.components import (
    COMPONENT_TABLE_COLUMNS,
    DEFAULT_MAX_COMPONENTS,
    DEFAULT_MIN_AMPLITUDE,
    FrequencyComponent,
    components_table,
    extract_components,
    select_significant_components,
)
from fft_explorer.analysis.transform import direct_dft, is_power_of_two, transform

__all__ = [
    "COMPONENT_TABLE_COLUMNS",
    "DEFAULT_MAX_COMPONENTS",
    "DEFAULT_MIN_AMPLITUDE",
    "FrequencyComponent",
    "components_table",
    "direct_dft",
    "extract_components",
    "is_power_of_two",
    "select_significant_components",
    "transform",
]
