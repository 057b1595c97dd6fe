"""Data preparation for export."""

import datetime
import json
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.models import AnalysisResult, DashboardStats, MovieRecord
from ..core.schema import validate_records


def _stats_to_list(stats) -> List[Dict[str, Any]]:
    return [{"name": s.label, "value": s.count} for s in stats]


def prepare_export(result: AnalysisResult, stats: DashboardStats) -> Dict[str, Any]:
    """Prepare data for JSON export."""
    
    # Create export data
    export_data = {
        "source": result.source_name,
        "summary": {
            "total_movies": stats.total_movies,
            "top_genre": stats.top_genre,
            "top_country": stats.top_country,
            "positive_ratio": round(stats.positive_ratio, 4),
            "top_genres": _stats_to_list(stats.top_genres),
            "top_countries": _stats_to_list(stats.top_countries),
            "top_languages": _stats_to_list(stats.top_languages),
            "top_recommenders": _stats_to_list(stats.top_recommenders),
            "decades": _stats_to_list(stats.decades),
            "sentiment": dict(stats.sentiment),
            "most_discussed": [m.title for m in stats.most_discussed],
        },
        "movies": [movie.to_dict() for movie in result.movies],
        "metadata": {
            "characters_analyzed": result.characters_analyzed,
            "truncated": result.truncated,
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION
        }
    }
    
    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    # Add timestamp
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()
    
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_records_from_json(filename: str) -> List[MovieRecord]:
    """Load movies from an export file or a raw extraction array."""
    with open(filename, 'r', encoding='utf-8') as f:
        data = json.load(f)
    
    if isinstance(data, dict) and "movies" in data:
        data = data["movies"]
    return validate_records(data)
