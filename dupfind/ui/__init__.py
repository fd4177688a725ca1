# dupfind/ui/__init__.py
from .text_reporter import pluralize, display_path, format_summary, format_group, render_text_report
from .json_reporter import groups_to_json, write_json_report, load_json_report
