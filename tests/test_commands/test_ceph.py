from rook_ceph.commands import run_ceph_command, run_rbd_command

OPERATOR_EXEC = [
    "kubectl",
    "--namespace",
    "rook-ceph",
    "exec",
    "deploy/rook-ceph-operator",
    "--",
]
CONF = "--conf=/var/lib/rook/rook-ceph/rook-ceph.config"


def test_ceph_passthrough(context, runner):
    run_ceph_command(context, ["osd", "tree", "--format", "json"])
    assert runner.calls == [[*OPERATOR_EXEC, "ceph", "osd", "tree", "--format", "json", CONF]]


def test_rbd_passthrough(context, runner):
    run_rbd_command(context, ["ls", "-p", "replicapool"])
    assert runner.calls == [[*OPERATOR_EXEC, "rbd", "ls", "-p", "replicapool", CONF]]


def test_ceph_without_args(context, runner):
    run_ceph_command(context, [])
    assert runner.calls == [[*OPERATOR_EXEC, "ceph", CONF]]
