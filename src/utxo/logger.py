"""
Simple category logger shared by the admission layer
"""
import time
from typing import Dict, List


class Logger:
    """Simple logger for debugging and testing"""

    def __init__(self, component_id: str, verbose: bool = True):
        self.component_id = component_id
        self.verbose = verbose
        self.logs = []

    def log(self, category: str, message: str):
        """Log a message"""
        timestamp = time.time()
        log_entry = f"[{self.component_id[:8]}] [{category}] {message}"
        self.logs.append({
            "timestamp": timestamp,
            "node": self.component_id,
            "category": category,
            "message": message
        })
        if self.verbose:
            print(log_entry)

    def get_logs(self) -> List[Dict]:
        """Get all logs"""
        return self.logs

    def get_logs_by_category(self, category: str) -> List[Dict]:
        return [entry for entry in self.logs if entry["category"] == category]
