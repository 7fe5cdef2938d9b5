"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Union, Optional

from . import settings


class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyTableLog(Log):
    def __init__(self, alphabet_size: int, symbol_count: int) -> None:
        self.alphabet_size = alphabet_size
        self.symbol_count = symbol_count
        super().__init__("Frequency_table_log", LogLevel.INFO,
                         f"Distinct symbols: {alphabet_size}, Total symbols: {symbol_count}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO,
                         f"Symbol count: {symbol_count}, Encoded size: {encoded_size} bits")


class ProgressStep(Log):
    def __init__(self, type_name: str, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__(type_name, LogLevel.PROGRESS, message)


class TreeMergeProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Tree_merge_progress_step", message, total_steps)


class CodingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Coding_progress_step", message, total_steps)


class DecodingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Decoding_progress_step", message, total_steps)


class Logger:
    def __init__(self) -> None:
        self.progress_counts = {
            TreeMergeProgressStep: 0,
            CodingProgressStep: 0,
            DecodingProgressStep: 0,
        }

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = settings.DISPLAY_INFO
        self.display_warning = True
        self.display_error = True
        self.display_progress = settings.DISPLAY_PROGRESS

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.step_interval_counts = {
            TreeMergeProgressStep: settings.TREE_STEP_INTERVAL_COUNT,
            CodingProgressStep: settings.CODING_STEP_INTERVAL_COUNT,
            DecodingProgressStep: settings.DECODING_STEP_INTERVAL_COUNT,
        }

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            step_type = type(log)
            if step_type not in self.progress_counts:
                raise ValueError(f"Unknown progress step: {step_type.__name__}")
            self.progress_counts[step_type] += 1
            count = self.progress_counts[step_type]
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            if self.record_progress:
                self.logs.append(log)
            if self.display_progress and (count % self.step_interval_counts[step_type] == 0):
                print(log)

    def tracks_progress(self) -> bool:
        return self.display_progress or self.record_progress

    def save(self, file_path: str) -> None:
        saved_levels = {
            LogLevel.INFO: self.save_info,
            LogLevel.WARNING: self.save_warning,
            LogLevel.ERROR: self.save_error,
            LogLevel.PROGRESS: self.save_progress,
        }
        with open(file_path, 'w') as file:
            for log in self.logs:
                if saved_levels[log.level]:
                    file.write(str(log) + "\n")
