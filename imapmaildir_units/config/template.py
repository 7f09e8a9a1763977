"""Default registry template.

This template is written to ~/.config/imapmaildir-units/accounts.toml
when running `imapmaildir-units config init`.
"""

REGISTRY_TEMPLATE = """\
# imapmaildir-units account registry
#
# Each enabled account gets a systemd user service and timer running
# `imapmaildir --account <name>`, plus ~/.config/imapmaildir/accounts/<name>.toml

# Path to the imapmaildir executable (default: "imapmaildir" from PATH)
# binary = "/usr/local/bin/imapmaildir"

# Example account:
#
# [accounts.work]
# enabled = true
# mailboxes = ["INBOX", "Sent"]
# maildir_abs_path = "/home/me/Mail/work"
# user_name = "me@example.com"
# password_command = ["pass", "show", "mail/work"]
#
# [accounts.work.imap]
# host = "imap.example.com"
# port = 993
#
# [accounts.work.service]
# interval_sec = 300
# # name = "imapmaildir-sync-work"
#
# [accounts.work.service.extra_config.Service]
# Nice = 10
#
# After editing, generate the units with:
#   imapmaildir-units generate
#   systemctl --user daemon-reload
#   systemctl --user enable --now imapmaildir-sync-work.timer
"""
