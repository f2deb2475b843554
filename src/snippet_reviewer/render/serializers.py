"""JSON and YAML output of review results."""

import yaml

from snippet_reviewer.models.result import ReviewResult


class CustomDumper(yaml.SafeDumper):
    """YAML dumper writing multi-line strings as literal blocks."""


def _str_representer(dumper: yaml.Dumper, data: str) -> yaml.Node:
    """Custom string representer for multiline strings."""
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


CustomDumper.add_representer(str, _str_representer)


def to_yaml(result: ReviewResult) -> str:
    """Serialize a review result to YAML, keeping field order."""
    return yaml.dump(
        result.model_dump(),
        Dumper=CustomDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=1000,  # Prevent line wrapping
        indent=4,
    )


def to_json(result: ReviewResult) -> str:
    """Serialize a review result to indented JSON."""
    return result.model_dump_json(indent=2)
