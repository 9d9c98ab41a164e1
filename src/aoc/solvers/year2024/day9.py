"""2024 day 9: Disk Fragmenter"""

from __future__ import annotations

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        disk_map = input.strip()
        if not disk_map.isdecimal():
            raise ParseError("disk map must be a string of digits")
        self.lengths = [int(c) for c in disk_map]

    def _blocks(self) -> list[int | None]:
        blocks: list[int | None] = []
        for i, length in enumerate(self.lengths):
            blocks.extend([i // 2 if i % 2 == 0 else None] * length)
        return blocks

    @staticmethod
    def _checksum(blocks: list[int | None]) -> int:
        return sum(i * file_id for i, file_id in enumerate(blocks) if file_id is not None)

    def solve_part_1(self) -> Solution:
        blocks = self._blocks()
        left, right = 0, len(blocks) - 1
        while True:
            while left < right and blocks[left] is not None:
                left += 1
            while left < right and blocks[right] is None:
                right -= 1
            if left >= right:
                break
            blocks[left], blocks[right] = blocks[right], None
        return Solution("Filesystem checksum", str(self._checksum(blocks)))

    def solve_part_2(self) -> MaybeSolution:
        # (start, length) of every file and free span
        files: list[tuple[int, int]] = []
        gaps: list[list[int]] = []
        offset = 0
        for i, length in enumerate(self.lengths):
            if i % 2 == 0:
                files.append((offset, length))
            elif length:
                gaps.append([offset, length])
            offset += length

        checksum = 0
        for file_id in range(len(files) - 1, -1, -1):
            start, length = files[file_id]
            for gap in gaps:
                if gap[0] >= start:
                    break
                if gap[1] >= length:
                    start = gap[0]
                    gap[0] += length
                    gap[1] -= length
                    break
            checksum += file_id * sum(range(start, start + length))
        return Solution("Filesystem checksum without fragmentation", str(checksum))
