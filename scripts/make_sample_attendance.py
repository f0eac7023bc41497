#!/usr/bin/env python
from __future__ import annotations

import argparse
from pathlib import Path

from openpyxl import Workbook

CATEGORIES = ["기본", "연장", "주특", "주휴"]


def build_sample_workbook(sheet_title: str, workers: list[tuple[str, str]], days: int = 31) -> Workbook:
    """Attendance workbook in the usual hand-made layout.

    Two title rows, the header on row 3 (성별/성명/구분 then one column per
    day), and four category rows per worker with gender and name written only
    on the first row of each block.
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title
    sheet.append([f"{sheet_title} 출역현황"])
    sheet.append([])
    sheet.append(["성별", "성명", "구분", *range(1, days + 1)])

    for gender, name in workers:
        for index, category in enumerate(CATEGORIES):
            hours: list[object] = [None] * days
            if category == "기본":
                hours = [8 if day % 7 not in (6, 0) else None for day in range(1, days + 1)]
            elif category == "연장":
                hours[0] = 2
            elif category == "주특":
                hours[5] = 8
            elif category == "주휴":
                hours[6] = 8
            label = (gender, name) if index == 0 else (None, None)
            sheet.append([*label, category, *hours])
    return workbook


def main() -> None:
    parser = argparse.ArgumentParser(description="근태표 예제 워크북 생성")
    parser.add_argument("--sheet", default="24년 3월", help="시트 이름 (예: 24년 3월)")
    parser.add_argument("--output", required=True, help="출력 파일 경로 (.xlsx)")
    parser.add_argument("--worker", action="append", default=[], help="성별:이름 (예: 남:홍길동)")
    args = parser.parse_args()

    workers = [tuple(item.split(":", 1)) for item in args.worker] or [("남", "홍길동"), ("여", "김영희")]
    workbook = build_sample_workbook(args.sheet, workers)  # type: ignore[arg-type]

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    print(f"근태표 예제가 생성되었습니다: {output}")


if __name__ == "__main__":
    main()
