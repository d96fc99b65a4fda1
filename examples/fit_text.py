#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""テキストレイアウトサンプルスクリプト

このスクリプトはprint-layoutの基本的な使い方を示します。
設定変数を変更して、様々なレイアウトオプションを試すことができます。

Usage:
    cd examples
    python fit_text.py
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# プロジェクトルートをパスに追加（開発時用）
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))


# =============================================================================
# 設定変数 - ここを変更して動作をカスタマイズ
# =============================================================================

# レイアウトするテキスト
TEXTS = ["HELLO WORLD", "GOOD MORNING EVERYONE", "ラーメン大好き"]

# 向き: "horizontal" | "vertical"
ORIENTATION = "horizontal"

# フォント: PDF標準フォント名、または .ttf/.otf ファイルパス
# - 標準フォント (Helvetica など): pypdfium2 で計測
# - フォントファイル: Pillow で計測（日本語は CJK フォントが必要）
FONT = "Helvetica"

# True にすると、印刷業者向けの出力（インチ/ポイント）を表示します
SHOW_EXPORT = False

# =============================================================================
# メイン処理（通常は変更不要）
# =============================================================================


def main() -> None:
    """メイン処理。"""
    from print_layout.cli import create_measurer
    from print_layout.core.measurer import PdfiumTextMeasurer
    from print_layout.core.text_layout import TextLayoutEngine
    from print_layout.output.printful_export import export_for_printful

    engine = TextLayoutEngine()
    measurer = create_measurer(FONT)

    print("=" * 60)
    print("Text Layout Example")
    print("=" * 60)
    print(f"Orientation: {ORIENTATION}")
    print(f"Font:        {FONT}")
    area = engine.get_text_area(ORIENTATION)
    print(f"Text area:   {area.width:g} x {area.height:g} px at ({area.x:g}, {area.y:g})")
    print("=" * 60)

    try:
        for text in TEXTS:
            layout = engine.fit_text(text, ORIENTATION, FONT, measurer)
            print(f"\n{text!r}")
            print(f"  Font size: {layout.font_size}px (attempts: {layout.metadata.scaling_attempts})")
            print(f"  Fits:      {layout.metadata.fits}")
            for line in layout.lines:
                print(f"  | {line}")
            if SHOW_EXPORT:
                payload = export_for_printful(layout, engine.config)
                print(json.dumps(payload, ensure_ascii=False, indent=2))
    finally:
        if isinstance(measurer, PdfiumTextMeasurer):
            measurer.close()


if __name__ == "__main__":
    main()
