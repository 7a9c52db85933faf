# terrascan

Building blocks for scanning infrastructure-as-code against security
policies: records for the violations found, the registry of supported
policy types, loading of YAML and JSON documents with line numbers,
ANSI coloring of rendered output, logging setup and small path and
error helpers.

## Results

`terrascan.results` holds `Violation`, `ViolationStats` and
`ViolationStore`.

```python
import sys

from terrascan.results import Violation, ViolationStore
from terrascan.utils.printer import print_json

store = ViolationStore()
store.add_result(Violation(rule_name="s3Versioning", severity="HIGH",
                           resource_name="bucket", resource_type="aws_s3_bucket",
                           file="main.tf", line_number=12))
store.count.high_count += 1
store.count.total_count += 1

combined = store.add(ViolationStore())   # concatenates violations, sums counts
print_json(combined, sys.stdout)         # uses to_dict(); indented by two spaces
```

`to_dict()` gives the fields that appear in output (`rule_name`,
`description`, `rule_id`, `severity`, `category`, `resource_name`,
`resource_type`, `file`, `line`, and the `low`/`medium`/`high`/`total`
counts); rule and resource data are left out.

## Policy types

```python
from terrascan.policy.cloud_providers import (
    get_default_iac_type,
    get_default_policy_paths,
    is_cloud_provider_supported,
    supported_policy_types,
)

supported_policy_types(False)          # ['aws', 'azure', 'gcp', 'github', 'k8s']
supported_policy_types(True)           # also 'all'
is_cloud_provider_supported("aws")     # True
get_default_iac_type("aws")            # 'terraform'
get_default_policy_paths(["all"], "/opt/policies")
# ['/opt/policies/aws', '/opt/policies/azure', ..., '/opt/policies/k8s']
```

`all` is an indirect type that expands to every direct type. An
unregistered type passed to `get_default_policy_paths` raises
`ValueError`. New types are added with `register_cloud_provider` and
`register_indirect_cloud_provider`.

## Loading documents

```python
from terrascan.utils.documents import load_json, load_yaml, load_yaml_string

for doc in load_yaml("deployment.yaml"):
    print(doc.start_line, doc.end_line, doc.data)
```

YAML input is split on lines starting with `---`; each `IacDocument`
records the lines it spans and holds its content re-serialised as YAML.
`read_yaml_file` reads a file whose top level is a mapping.

## Colored output

```python
from terrascan.coloring.colors import colorize
from terrascan.coloring.patterns import get_color_patterns

print(colorize("Fg#fff|Bg#f00|Bold", "FAILED"))
print(colorize("?HIGH=Fg#f00?MEDIUM=Fg#c84?LOW=Fg#cc0", "HIGH"))

for pattern, style in get_color_patterns().items():
    ...  # compiled line patterns with key/value styles
```

The rules returned by `get_color_patterns` can be replaced by a JSON file
named in the `TERRASCAN_COLORS_FILE` environment variable; each entry holds
`key-pattern`, `value-pattern`, `key-style` and `value-style`. Call
`reset_color_patterns` to load them again.

## Logging and helpers

- `terrascan.log.init(encoding, level)` sets up the `terrascan` logger on
  standard error, as JSON records (`"json"`) or coloured console lines;
  `get_default_logger()` returns it.
- `terrascan.utils.paths`: `get_abs_path` (expands `~`),
  `find_all_directories`, `find_files_by_suffix`,
  `find_files_by_suffix_in_dir`, `filter_by_suffix`, `add_file_extension`.
- `terrascan.utils.errors.wrap_error` combines an error with those gathered
  so far into one whose message is `"<earlier>: <new>"`.
- `terrascan.version.get()` returns the release version.

## What this package does not do

It evaluates no policies: there is no policy engine that runs rules against
resources. It has no output writers for JSON, YAML or XML beyond
`print_json`, no writer that applies the color patterns to a stream, no
webhook or other notifications, and no command-line tool.

## Running the tests

Install the `test` extra and run `pytest` from the project root.