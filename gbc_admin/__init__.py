"""gbc-admin: helpers for multi-file Trestle admin resources.

* :mod:`gbc_admin.menu` resolves navigation entries from ``app/admin/menu.yml``.
* :mod:`gbc_admin.scaffolder` generates an admin resource split over several files.
"""

__version__ = "0.1.0"
