#!/usr/bin/env python3
"""
Flappy Term - 啟動腳本
"""

from flappy.app import main

if __name__ == "__main__":
    print("=" * 60)
    print("Flappy Term - 字元網格版")
    print("(P) 開始  (Q) 離開  SPACE 拍翅")
    print("=" * 60)
    main()
