"""Init options and the prerequisite manifests the KUDO manager needs."""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as _dist_version
from typing import Any

import yaml

GROUP = "kudo.dev"
CRD_VERSION = "v1alpha1"
DEFAULT_NAMESPACE = "kudo-system"
DEFAULT_GRACE_PERIOD = 10

MANAGER_NAME = "kudo-manager"
WEBHOOK_SECRET_NAME = "kudo-webhook-server-secret"

Manifest = dict[str, Any]


def _current_version() -> str:
    try:
        return _dist_version("kudoctl")
    except PackageNotFoundError:
        return "dev"


@dataclass
class Options:
    """Configurable options for installing KUDO."""

    version: str
    namespace: str = DEFAULT_NAMESPACE
    termination_grace_period_seconds: int = DEFAULT_GRACE_PERIOD
    image: str = ""

    def __post_init__(self) -> None:
        if not self.image:
            self.image = f"kudobuilder/controller:v{self.version}"


def new_options(version: str = "") -> Options:
    """Return options with defaults; an empty version means the current one."""
    return Options(version=version or _current_version())


def generate_labels(labels: dict[str, str]) -> dict[str, str]:
    """Return ``labels`` with the KUDO manager ``app`` label added."""
    return {**labels, "app": MANAGER_NAME}


def to_yaml(obj: Manifest) -> str:
    """Serialise a manifest as block-style YAML with sorted keys."""
    return yaml.safe_dump(obj, default_flow_style=False, sort_keys=True)


def _object_meta(
    name: str, namespace: str = "", labels: dict[str, str] | None = None
) -> Manifest:
    meta: Manifest = {"creationTimestamp": None, "name": name}
    if namespace:
        meta["namespace"] = namespace
    if labels:
        meta["labels"] = labels
    return meta


def namespace_manifest(namespace: str) -> Manifest:
    """The system namespace manifest."""
    return {
        "apiVersion": "v1",
        "kind": "Namespace",
        "metadata": _object_meta(
            namespace, labels=generate_labels({"controller-tools.k8s.io": "1.0"})
        ),
        "spec": {},
        "status": {},
    }


def service_account(opts: Options) -> Manifest:
    """The manager's service account manifest."""
    return {
        "apiVersion": "v1",
        "kind": "ServiceAccount",
        "metadata": _object_meta(
            MANAGER_NAME, namespace=opts.namespace, labels=generate_labels({})
        ),
    }


def role_binding(opts: Options) -> Manifest:
    """The cluster role binding granting the manager cluster-admin."""
    return {
        "apiVersion": "rbac.authorization.k8s.io/v1",
        "kind": "ClusterRoleBinding",
        "metadata": _object_meta("kudo-manager-rolebinding"),
        "roleRef": {
            "apiGroup": "rbac.authorization.k8s.io",
            "kind": "ClusterRole",
            "name": "cluster-admin",
        },
        "subjects": [
            {
                "kind": "ServiceAccount",
                "name": MANAGER_NAME,
                "namespace": opts.namespace,
            }
        ],
    }


def webhook_secret(opts: Options) -> Manifest:
    """The secret used by the manager's webhook server."""
    return {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": _object_meta(WEBHOOK_SECRET_NAME, namespace=opts.namespace),
    }


def prereq(opts: Options) -> list[Manifest]:
    """All prerequisite objects, in install order."""
    return [
        namespace_manifest(opts.namespace),
        service_account(opts),
        role_binding(opts),
        webhook_secret(opts),
    ]


def prereq_manifests(opts: Options) -> list[str]:
    """The prerequisite objects rendered as YAML documents."""
    return [to_yaml(obj) for obj in prereq(opts)]