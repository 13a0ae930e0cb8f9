import threading

from fwos.metrics import Metrics


def test_record_counts_both_verdicts():
    m = Metrics()
    for verdict in (True, True, False):
        m.record_packet(verdict)
    assert (m.allowed, m.denied) == (2, 1)


def test_summary_text():
    m = Metrics()
    m.record_packet(True)
    m.record_packet(False)
    m.record_packet(False)
    assert m.summary() == (
        "\n========== FIREWALL SUMMARY ==========\n"
        "allowed packets: 1\n"
        "denied packets : 2"
    )


def test_print_summary(capsys):
    m = Metrics()
    m.print_summary()
    assert capsys.readouterr().out == m.summary() + "\n"


def test_concurrent_recording():
    m = Metrics()

    def record():
        for _ in range(200):
            m.record_packet(True)
            m.record_packet(False)

    threads = [threading.Thread(target=record) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert m.allowed == m.denied == 800