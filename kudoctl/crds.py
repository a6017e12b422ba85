"""Manifests for the custom resource definitions the KUDO manager serves."""

from __future__ import annotations

from kudoctl.prereqs import CRD_VERSION, GROUP, Manifest, generate_labels, to_yaml


def _prop(type_: str = "", description: str = "", **extra: object) -> Manifest:
    """A JSON schema property; empty fields are left out."""
    prop: Manifest = {}
    if description:
        prop["description"] = description
    if type_:
        prop["type"] = type_
    prop.update({key: value for key, value in extra.items() if value})
    return prop


def _object_items(properties: Manifest | None = None, required: list[str] | None = None) -> Manifest:
    return _prop("object", properties=properties, required=required)


_DEPENDENCY_PROPS: Manifest = {
    "referenceName": _prop(
        "string",
        "Name specifies the name of the dependency.  Referenced via this in defaults.config",
    ),
    "crdVersion": _prop(
        "string",
        "Version captures the requirements for what versions of the above object "
        "are allowed Example: ^3.1.4",
    ),
}


def _validation(spec_props: Manifest, status: Manifest | None = None) -> Manifest:
    return {
        "openAPIV3Schema": {
            "properties": {
                "apiVersion": _prop("string"),
                "kind": _prop("string"),
                "meta": _prop("object"),
                "spec": _prop("object", properties=spec_props),
                "status": status if status is not None else _prop("object"),
            }
        }
    }


def _generate_crd(kind: str, plural: str, validation: Manifest) -> Manifest:
    """A CRD manifest for ``kind`` with the given validation schema."""
    plural = plural.lower()
    return {
        "apiVersion": "apiextensions.k8s.io/v1beta1",
        "kind": "CustomResourceDefinition",
        "metadata": {
            "creationTimestamp": None,
            "labels": generate_labels({"controller-tools.k8s.io": "1.0"}),
            "name": f"{plural}.{GROUP}",
        },
        "spec": {
            "group": GROUP,
            "names": {
                "kind": kind,
                "plural": plural,
                "singular": kind.lower(),
            },
            "scope": "Namespaced",
            "validation": validation,
            "version": CRD_VERSION,
        },
        "status": {
            "acceptedNames": {"kind": "", "plural": ""},
            "conditions": [],
            "storedVersions": [],
        },
    }


def operator_crd() -> Manifest:
    """The Operator CRD manifest."""
    maintainers = {"name": _prop("string"), "email": _prop("string")}
    spec_props = {
        "description": _prop("string"),
        "kubernetesVersion": _prop("string"),
        "kudoVersion": _prop("string"),
        "maintainers": _prop(items=_object_items(maintainers)),
        "url": _prop("string"),
    }
    return _generate_crd("Operator", "operators", _validation(spec_props))


def operator_version_crd() -> Manifest:
    """The OperatorVersion CRD manifest."""
    param_props = {
        "default": _prop(
            "string", "Default is a default value if no paramter is provided by the instance"
        ),
        "description": _prop(
            "string",
            "Description captures a longer description of how the variable will be used",
        ),
        "displayName": _prop("string", "Human friendly crdVersion of the parameter name"),
        "name": _prop(
            "string",
            "Name is the string that should be used in the template file for example, "
            "if `name: COUNT` then using the variable `.Params.COUNT`",
        ),
        "required": _prop(
            "boolean",
            "Required specifies if the parameter is required to be provided by all "
            "instances, or whether a default can suffice",
        ),
        "trigger": _prop(
            "string",
            "Trigger identifies the plan that gets executed when this parameter changes "
            "in the Instance object. Default is `update` if present, or `deploy` if not present",
        ),
    }
    spec_props = {
        "connectionString": _prop(
            "string",
            "ConnectionString defines a mustached string that can be used to connect "
            "to an instance of the Operator",
        ),
        "dependencies": _prop(
            "array",
            items=_object_items(dict(_DEPENDENCY_PROPS), ["referenceName", "crdVersion"]),
        ),
        "operator": _prop("object"),
        "parameters": _prop("array", items=_object_items(param_props)),
        "plans": _prop("object", "Plans specify a map a plans that specify how to"),
        "tasks": _prop("object"),
        "templates": _prop(
            "object",
            "List of go templates YAML files that define the application operator instance",
        ),
        "upgradableFrom": _prop(
            "array",
            "UpgradableFrom lists all OperatorVersions that can upgrade to this OperatorVersion",
            items=_prop("object"),
        ),
        "crdVersion": _prop("string"),
    }
    return _generate_crd("OperatorVersion", "operatorversions", _validation(spec_props))


def instance_crd() -> Manifest:
    """The Instance CRD manifest."""
    spec_props = {
        "dependencies": _prop(
            "array",
            "Dependency references specific",
            items=_object_items(dict(_DEPENDENCY_PROPS), ["referenceName", "crdVersion"]),
        ),
        "OperatorVersion": _prop(
            "object", "Operator specifies a reference to a specific Operator object"
        ),
        "parameters": _prop("object"),
    }
    status_props = {
        "planStatus": _prop("object"),
        "aggregatedStatus": _prop("object"),
    }
    status = _prop("object", properties=status_props)
    return _generate_crd("Instance", "instances", _validation(spec_props, status))


def crds() -> list[Manifest]:
    """All KUDO CRDs: Operator, OperatorVersion and Instance, in that order."""
    return [operator_crd(), operator_version_crd(), instance_crd()]


def crd_manifests() -> list[str]:
    """The KUDO CRDs rendered as YAML documents."""
    return [to_yaml(obj) for obj in crds()]