class RequestIdFilter:
    """
    Menambahkan konteks request ke record log.
    Jika belum ada, isi dengan '-'.
    """

    DEFAULT_FIELDS = ("request_id", "ip", "method", "path", "status", "duration_ms", "agent", "referer")

    def filter(self, record):
        for name in self.DEFAULT_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, "-")
        if not hasattr(record, "status_color"):
            record.status_color = ""
        # Color by status code (2xx green, 4xx yellow, 5xx red)
        try:
            st = int(record.status)
            if 200 <= st < 300:
                record.status_color = "\x1b[32m"  # green
            elif 400 <= st < 500:
                record.status_color = "\x1b[33m"  # yellow
            elif 500 <= st < 600:
                record.status_color = "\x1b[31m"  # red
        except (TypeError, ValueError):
            pass
        return True
