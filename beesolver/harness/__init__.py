from .scan import ScanResult, scan, scan_file
from .session import check_dictionary, deliver_results, prompt_dictionary, prompt_hive, run_session

__all__ = ["ScanResult", "scan", "scan_file", "check_dictionary", "deliver_results",
           "prompt_dictionary", "prompt_hive", "run_session"]
