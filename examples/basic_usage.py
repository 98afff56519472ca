"""Minimal tour of the arrayutils surface."""

from __future__ import annotations

from arrayutils import comparing, count, filter, find, max, min, rotate, zip_many


def main() -> None:
    readings = [12, 7, 31, 7, 18, 4, 31]

    print("Even readings:", count(readings, lambda v: v % 2 == 0))
    print("First above 20:", find(readings, lambda v: v > 20).or_else("none"))
    print("Above 100:", filter(readings, lambda v: v > 100).or_else([]))
    print("Lowest:", min(readings).unwrap())
    print("Highest:", max(readings).unwrap())

    words = ["kiwi", "banana", "fig", "cherry"]
    print("Longest word:", max(words, comparing(len)).unwrap())

    lanes = [[1, 2, 3], [4, 5], [6]]
    print("Interleaved:", zip_many(lanes))

    ring = [1, 2, 3, 4, 5]
    rotate(ring, 2)
    print("Rotated right by 2:", ring)


if __name__ == "__main__":
    main()
