from fwos.audit import AuditLogger
from fwos.policy import Flow


def test_log_allowed(capsys):
    AuditLogger().log(Flow("10.1.1.2", "8.8.8.8", "tcp", 443), True)
    assert capsys.readouterr().out == "[AUDIT] 10.1.1.2 -> 8.8.8.8 ALLOW\n"


def test_log_denied(capsys):
    AuditLogger().log(Flow("10.1.1.0", "10.0.0.1", "tcp", 443), False)
    assert capsys.readouterr().out == "[AUDIT] 10.1.1.0 -> 10.0.0.1 DENY\n"