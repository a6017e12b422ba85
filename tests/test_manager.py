import yaml

from kudoctl import manager
from kudoctl.prereqs import Options, new_options


def test_manager_labels():
    assert manager.manager_labels() == {
        "control-plane": "controller-manager",
        "controller-tools.k8s.io": "1.0",
        "app": "kudo-manager",
    }


def test_deployment_uses_options():
    opts = Options(version="1.2.3", namespace="custom")
    dep = manager.manager_deployment(opts)
    assert dep["kind"] == "StatefulSet"
    assert dep["metadata"]["namespace"] == "custom"
    container = dep["spec"]["template"]["spec"]["containers"][0]
    assert container["image"] == opts.image
    assert container["name"] == "manager"
    assert dep["spec"]["template"]["spec"]["terminationGracePeriodSeconds"] == 10


def test_deployment_selector_matches_template_labels():
    dep = manager.manager_deployment(new_options("0.5.0"))
    assert dep["spec"]["selector"]["matchLabels"] == dep["spec"]["template"]["metadata"]["labels"]
    assert dep["spec"]["serviceName"] == "kudo-controller-manager-service"


def test_service_targets_webhook_port():
    opts = new_options("0.5.0")
    svc = manager.manager_service(opts)
    dep = manager.manager_deployment(opts)
    port_names = [p["name"] for p in dep["spec"]["template"]["spec"]["containers"][0]["ports"]]
    assert svc["spec"]["ports"][0]["targetPort"] in port_names
    assert svc["spec"]["ports"][0]["port"] == 443
    assert svc["spec"]["selector"] == manager.manager_labels()


def test_manifests_order_and_round_trip():
    opts = new_options("0.5.0")
    docs = [yaml.safe_load(text) for text in manager.manager_manifests(opts)]
    assert docs == [manager.manager_service(opts), manager.manager_deployment(opts)]
    assert [d["kind"] for d in docs] == ["Service", "StatefulSet"]


def test_secret_volume_mode():
    dep = manager.manager_deployment(new_options("0.5.0"))
    volume = dep["spec"]["template"]["spec"]["volumes"][0]
    assert volume["secret"]["defaultMode"] == 420
    assert volume["secret"]["secretName"] == "kudo-webhook-server-secret"