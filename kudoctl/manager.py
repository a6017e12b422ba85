"""Manifests for the KUDO manager stateful set and its service."""

from __future__ import annotations

from kudoctl.prereqs import (
    WEBHOOK_SECRET_NAME,
    Manifest,
    Options,
    generate_labels,
    to_yaml,
)

MANAGER_DEPLOYMENT_NAME = "kudo-controller-manager"
MANAGER_SERVICE_NAME = "kudo-controller-manager-service"
_SECRET_DEFAULT_MODE = 420


def manager_labels() -> dict[str, str]:
    """Labels that identify the KUDO manager pods."""
    return generate_labels(
        {"control-plane": "controller-manager", "controller-tools.k8s.io": "1.0"}
    )


def _cert_volume() -> Manifest:
    """The volume that mounts the webhook certificate store."""
    volume_source: Manifest = dict(
        defaultMode=_SECRET_DEFAULT_MODE,
        secretName=WEBHOOK_SECRET_NAME,
    )
    volume: Manifest = {"name": "cert"}
    volume["secret"] = volume_source
    return volume


def manager_deployment(opts: Options) -> Manifest:
    """The KUDO manager stateful set manifest."""
    container: Manifest = {
        "command": ["/root/manager"],
        "env": [
            {
                "name": "POD_NAMESPACE",
                "valueFrom": {"fieldRef": {"fieldPath": "metadata.namespace"}},
            },
            {"name": "SECRET_NAME", "value": WEBHOOK_SECRET_NAME},
        ],
        "image": opts.image,
        "imagePullPolicy": "Always",
        "name": "manager",
        "ports": [
            {"containerPort": 9876, "name": "webhook-server", "protocol": "TCP"}
        ],
        "resources": {"requests": {"cpu": "100m", "memory": "50Mi"}},
        "volumeMounts": [{"mountPath": "/tmp/cert", "name": "cert", "readOnly": True}],
    }
    return {
        "apiVersion": "apps/v1",
        "kind": "StatefulSet",
        "metadata": {
            "creationTimestamp": None,
            "labels": manager_labels(),
            "name": MANAGER_DEPLOYMENT_NAME,
            "namespace": opts.namespace,
        },
        "spec": {
            "selector": {"matchLabels": manager_labels()},
            "serviceName": MANAGER_SERVICE_NAME,
            "template": {
                "metadata": {"creationTimestamp": None, "labels": manager_labels()},
                "spec": {
                    "containers": [container],
                    "serviceAccountName": "kudo-manager",
                    "terminationGracePeriodSeconds": opts.termination_grace_period_seconds,
                    "volumes": [_cert_volume()],
                },
            },
            "updateStrategy": {},
        },
        "status": {"replicas": 0},
    }


def manager_service(opts: Options) -> Manifest:
    """The KUDO manager service manifest."""
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {
            "creationTimestamp": None,
            "labels": manager_labels(),
            "name": MANAGER_SERVICE_NAME,
            "namespace": opts.namespace,
        },
        "spec": {
            "ports": [{"name": "kudo", "port": 443, "targetPort": "webhook-server"}],
            "selector": manager_labels(),
        },
        "status": {"loadBalancer": {}},
    }


def manager_manifests(opts: Options) -> list[str]:
    """The service and stateful set, in that order, rendered as YAML."""
    return [to_yaml(manager_service(opts)), to_yaml(manager_deployment(opts))]