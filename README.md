# jaegerkit

Small, dependency-free helpers for describing Jaeger deployments on
Kubernetes. Kubernetes objects are handled as plain manifest dictionaries,
shaped the way they appear in YAML or JSON.

## Modules

### `jaegerkit.dns`

- `dns_name(name)` lower-cases `name` and replaces every character outside
  `[a-z0-9]` with `-`. If the first character is replaced, an `a` is put in
  front; if the last character is replaced, a `z` is appended, so the result
  neither starts nor ends with a dash.

### `jaegerkit.util`

- `CommonSpec` is a dataclass holding the settings shared by Jaeger
  components: `annotations`, `labels`, `volume_mounts`, `volumes`,
  `resources` (with `limits` and `requests` maps), `affinity`,
  `tolerations`, `security_context` and `service_account`.
- `merge(common_specs)` merges a list of `CommonSpec`, most specific first,
  into a new `CommonSpec`. For annotations, labels and resource entries the
  first value seen for a key wins. Volumes and volume mounts are
  concatenated and then de-duplicated by name, keeping the first.
  Tolerations are concatenated as they are. `affinity`, `security_context`
  and `service_account` take the first value that is set.
- `remove_duplicated_volumes(volumes)` and
  `remove_duplicated_volume_mounts(volume_mounts)` keep the first item for
  each `name`.
- `as_owner(jaeger)` builds an owner reference (`apiVersion`, `kind`,
  `name`, `uid`, `controller: True`) from a Jaeger manifest.
- `labels(name, component, jaeger)` returns the recommended
  `app.kubernetes.io/*` labels for a component of a Jaeger instance.
- `get_es_hostname(opts)` returns the first URL of `es.server-urls`, or an
  empty string.
- `find_item(prefix, args)` returns the first argument starting with
  `prefix`, or an empty string.
- `get_port(arg, args, port)` returns the number after the `:` in the
  argument matching `arg`, falling back to `port` when there is none or it
  is not a valid 32-bit integer.
- `init_object_meta(obj)` makes sure `obj["metadata"]` exists and holds
  `labels` and `annotations` dictionaries.

### `jaegerkit.version`

- `Version` is a frozen dataclass with `operator`, `build_date`, `jaeger`
  and `python` fields; `str()` gives a one-line summary.
- `get(config=None)` builds a `Version`. The Jaeger version comes from
  `config["jaeger-version"]` when present, else from `default_jaeger()`.
  The operator version and build date are read from the `OPERATOR_VERSION`
  and `VERSION_DATE` environment variables.
- `default_jaeger()` returns the `JAEGER_VERSION` environment variable, or
  an empty string.

## Example

```python
from jaegerkit.dns import dns_name
from jaegerkit.util import CommonSpec, merge, get_port

dns_name("instance.with.dots-collector-headless")
# 'instance-with-dots-collector-headless'

merged = merge([
    CommonSpec(annotations={"hello": "world"}),
    CommonSpec(annotations={"hello": "jaeger", "name": "operator"}),
])
merged.annotations  # {'hello': 'world', 'name': 'operator'}

get_port("--processor.jaeger-compact.server-host-port=",
         ["--processor.jaeger-compact.server-host-port=:6831"], 1234)
# 6831
```

## What it does not do

jaegerkit only computes names, labels, merged specs and version details.
It does not talk to a Kubernetes cluster, watch or reconcile resources,
or deploy anything, and it has no command-line program.

## Installing

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.