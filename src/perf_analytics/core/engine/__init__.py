from .config import DEFAULT_ENGINE_CONFIG, load_config, merge_config, validate_config
from .contract import EngineContractError
from .features import cluster_feature_rows, cluster_records, feature_rows, resolve_size
from .frames import outliers_to_frame, records_from_frame
from .kmeans import kmeans
from .outliers import robust_z_outliers
from .rng import Mulberry32, create_rng
from .session import analyze_session, filter_records
from .standardize import standardize_rows
from .stats import median, percentile, percentile_sorted, robust_center_scale
from .summary import compute_stats

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "EngineContractError",
    "Mulberry32",
    "analyze_session",
    "cluster_feature_rows",
    "cluster_records",
    "compute_stats",
    "create_rng",
    "feature_rows",
    "filter_records",
    "kmeans",
    "load_config",
    "median",
    "merge_config",
    "outliers_to_frame",
    "percentile",
    "percentile_sorted",
    "records_from_frame",
    "resolve_size",
    "robust_center_scale",
    "robust_z_outliers",
    "standardize_rows",
    "validate_config",
]
