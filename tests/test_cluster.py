from fwos.cluster import ClusterManager


def test_bootstrap_output(capsys):
    ClusterManager().bootstrap()
    assert capsys.readouterr().out.splitlines() == [
        "[CLUSTER] node-1 elected leader",
        "[CLUSTER] heartbeat service started",
        "[CLUSTER] policy replication enabled",
    ]