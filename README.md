# kudoctl

Client-side building blocks for working with KUDO operators on Kubernetes.
Everything here works offline: it parses and checks command input and
produces manifests, without talking to a cluster.

## What is in the package

| Module | Contents |
| --- | --- |
| `kudoctl.params` | `parse_parameter`, `get_parameter_map`, `ParameterError` |
| `kudoctl.env` | `Settings`, `default_kudo_home`, `add_flags`, `load_settings` |
| `kudoctl.files` | `full_path_to_target`, `sha256_sum`, `copy_operator` |
| `kudoctl.prereqs` | `Options`, `new_options`, prerequisite manifests, `to_yaml` |
| `kudoctl.crds` | the Operator, OperatorVersion and Instance CRD manifests |
| `kudoctl.manager` | the manager StatefulSet and Service manifests |
| `kudoctl.initcmd` | `InitCommand`, `InitError`, `yaml_writer` |
| `kudoctl.commands` | argument checks for get, update, upgrade, package and repo index |
| `kudoctl.install` | `InstallOptions`, `InstallError` and install-time checks |

## Installation

Install the package with your usual Python tooling. It depends on PyYAML and
packaging.

## Usage

### Instance parameters

```python
from kudoctl.params import ParameterError, get_parameter_map

params = get_parameter_map(["replicas=3", "memory=1Gi"])
# {"replicas": "3", "memory": "1Gi"}

try:
    get_parameter_map(["replicas", "=3"])
except ParameterError as err:
    print(err)
    # parameter not set: replicas, parameter name can not be empty: =3
```

Every malformed entry is reported in one error, joined by `", "`.

### Settings

`load_settings(argv, environ)` reads `--home`, `--kubeconfig` and
`-n/--namespace` from `argv` (unknown arguments are ignored). A flag that is
given wins; otherwise `KUDO_HOME` and `KUBECONFIG` from `environ` are used;
otherwise the defaults apply: `~/.kudo`, `$HOME/.kube/config` and the
namespace `default`. Both arguments default to `sys.argv[1:]` and `os.environ`.

### File helpers

- `full_path_to_target(destination, name, overwrite)` returns the absolute
  path of `name` inside `destination`, expanding one `~`. It raises
  `NotADirectoryError` if `destination` is not a directory and
  `FileExistsError` if the target exists and `overwrite` is false.
- `sha256_sum(stream)` returns the hex SHA-256 of a binary stream.
- `copy_operator(source, base)` copies a directory or file into `base` and
  returns the path of the copy.

### Rendering the init manifests

```python
import sys

from kudoctl.crds import crd_manifests
from kudoctl.initcmd import yaml_writer
from kudoctl.manager import manager_manifests
from kudoctl.prereqs import new_options, prereq_manifests

opts = new_options("0.8.0")  # image: kudobuilder/controller:v0.8.0
manifests = crd_manifests() + prereq_manifests(opts) + manager_manifests(opts)
yaml_writer(sys.stdout, manifests)
```

`yaml_writer` puts a `---` line before each manifest and ends the stream with
`...`. `new_options("")` uses the installed package version, or `dev` when
the package metadata is unavailable.

`InitCommand` holds the options of `init`. `validate(args)` raises
`InitError` for positional arguments, for an image together with a version,
and for `wait` together with `crd_only`. `manifests()` returns the CRDs alone
when `crd_only` is set, and otherwise the prerequisites followed by the
manager Service and StatefulSet, with the image override applied.
`render(out)` writes that stream only when `output` is `yaml` (in any case)
and returns whether it wrote anything.

### Command checks

`kudoctl.commands` raises `CommandError` for:

- `validate_get_args(args)`: anything other than the single argument `instances`;
- `validate_update(args, instance_name, parameters)`: positional arguments,
  no instance name, or no parameters;
- `validate_upgrade(args, instance_name)`: not exactly one argument, or no
  instance name;
- `check_upgrade_versions(current, new)`: an unparsable version, or a new
  version that is not strictly greater; versions are compared with
  `packaging.version.Version`;
- `validate_package_args(args)`: not exactly one argument;
- `validate_repo_index(args, merge, merge_repo, url, url_repo)`: not exactly
  one argument, or both forms of the merge or of the url option.

### Install checks

`kudoctl.install` provides `validate_install_args(args)`,
`validate_crds(parameters, instance_parameters, skip_instance)`, which
reports every required parameter that has neither a default nor a given
value (unless `skip_instance` is set), `version_exists(versions, current)`,
and `apply_instance_overrides(instance, options)`, which returns a copy of an
instance manifest with the name and parameters from `InstallOptions` applied.

## What the package does not do

There is no command-line program. The package does not connect to a
Kubernetes cluster, so it does not install or wait for KUDO, list, update or
upgrade instances, or install operators. It does not read or write
repository configuration, download or build repository indexes, or create
package tarballs. It checks the input for those operations and produces the
manifests; applying them is left to other tools.

## Tests

The tests use pytest, which is installed with the `test` extra.