from typing import Any, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks used by the presentation layer.
    The statistics core reports progress and publishes finished
    results through these methods; all of them are optional.

    Methods:
        report_step(info, target, reset_counter, plus_step) -> None:
            Report progress of an analysis.
        update_key_value(key, value) -> None:
            Publish a finished result under a key.
    """
    def report_step(self, info: str = None, target: int = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from an analysis.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass

    def update_key_value(self, key: str, value: Any) -> None:
        """
        Report a status update with a key-value pair.

        Args:
            key (str): Status key.
            value: Status value.
        """
        pass
