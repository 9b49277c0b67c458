#!/usr/bin/env python3
"""
richhdr CLI Commands - Analyze Command

Rich header analysis for one or more files.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from typing import Any

from rich.console import Console

from ...config import Config
from ...core.inspector import RichHeaderInspector
from ...schemas.rich_header import RichHeaderResult
from ...utils.error_handler import classify_and_log
from ...utils.output_json import JsonOutputFormatter
from ..display import display_result
from .base import Command


class AnalyzeCommand(Command):
    """
    Command for decoding the Rich header of one or more files.

    Responsibilities:
    - Load configuration and apply command line overrides
    - Run RichHeaderInspector per file
    - Render results as tables or JSON
    - Report an exit code: files without a Rich header still count as processed
    """

    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute Rich header analysis.

        Args:
            args: Dictionary containing:
                - filenames: Paths to files to analyze
                - config: Optional config file path
                - output_json: JSON output flag
                - output: Output file path
                - aggregate: Sum object counts per tool id
                - verbose: Verbose output flag

        Returns:
            0 when every file was processed, 1 otherwise
        """
        verbose = args.get("verbose", False)
        filenames = list(args.get("filenames") or [])

        try:
            config = self._get_config(args.get("config"))
            if args.get("aggregate"):
                config.apply_overrides({"output": {"aggregate": True}})
        except (ValueError, TypeError) as e:
            error_info = classify_and_log(e, {"phase": "configuration"})
            self.context.console.print(f"[red]Configuration error: {e}[/red]")
            if verbose:
                self.context.console.print(f"[dim]{error_info.suggested_action}[/dim]")
            return 1

        results: list[RichHeaderResult] = []
        failed = False
        for filename in filenames:
            try:
                result = RichHeaderInspector(filename, config).analyze()
            except Exception as e:
                # Unexpected failures are reported per file so the others still run
                error_info = classify_and_log(
                    e, {"file": filename, "batch_mode": len(filenames) > 1}
                )
                self.context.console.print(f"[red]Error analyzing {filename}: {e}[/red]")
                if verbose:
                    self.context.console.print(f"[dim]{error_info.suggested_action}[/dim]")
                failed = True
                continue
            if result.status == "error":
                failed = True
            results.append(result)

        if args.get("output_json"):
            self._output_json_results(results, config, args.get("output"))
        else:
            self._output_console_results(results, args.get("output"))

        return 1 if failed else 0

    def _output_json_results(
        self,
        results: list[RichHeaderResult],
        config: Config,
        output_file: str | None,
    ) -> None:
        json_output = JsonOutputFormatter(results).to_json(indent=config.json_indent)

        if output_file:
            with open(output_file, "w") as f:
                f.write(json_output)
            self.context.console.print(f"[green]JSON results saved to: {output_file}[/green]")
        else:
            print(json_output)

    def _output_console_results(
        self, results: list[RichHeaderResult], output_file: str | None
    ) -> None:
        if output_file:
            with open(output_file, "w") as f:
                file_console = Console(file=f, width=120, no_color=True)
                for result in results:
                    display_result(result, file_console)
            self.context.console.print(f"[green]Results saved to: {output_file}[/green]")
            return

        for result in results:
            display_result(result, self.context.console)
