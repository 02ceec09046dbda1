from datetime import datetime


class AccessLogger:
    """Simple in-memory access log for the student API"""

    def __init__(self, max_entries=1000):
        self.logs = []
        self.max_entries = max_entries

    def log(self, request, status, user=None):
        """Log a request and the status it was answered with"""
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "ip": request.remote_addr,
            "path": request.path,
            "method": request.method,
            "user_agent": request.headers.get("User-Agent", ""),
            "status": status,
            "user": user,
        }
        self.logs.append(log_entry)

        if len(self.logs) > self.max_entries:
            self.logs = self.logs[-self.max_entries:]
        return log_entry

    def get_logs(self, limit=100):
        """Get recent logs"""
        return self.logs[-limit:] if self.logs else []

    def clear(self):
        self.logs = []
