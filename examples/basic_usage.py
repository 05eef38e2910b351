"""Basic usage example for sentinelq."""

import logging

from sentinelq import Queue, api


def main() -> None:
    """Demonstrate queue operations and the structural algorithms."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=== Queue Example ===\n")

    with Queue(name="fruit") as queue:
        for value in ["banana", "apple", "cherry", "apple", "banana"]:
            queue.insert_tail(value)
        print(f"Inserted: {queue.values()}")

        queue.sort()
        print(f"Sorted: {queue.values()}")

        queue.delete_adjacent_duplicates()
        print(f"Deduplicated: {queue.values()}")

        middle = queue.get_middle()
        print(f"Middle: {middle.value if middle else None}")

        queue.reverse()
        print(f"Reversed: {queue.values()}")

        queue.swap_pairs()
        print(f"Pairs swapped: {queue.values()}\n")

        # Removal hands the element over; copy its value into a small buffer
        sp = bytearray(4)
        element = queue.remove_head(sp, len(sp))
        if element is not None:
            print(f"Removed {element.value!r}, buffer holds {bytes(sp)!r}")
            element.release()

        print(f"Remaining size: {queue.size()}")

    print(f"\nOperations on an absent queue: size={api.size(None)}, "
          f"insert={api.insert_tail(None, 'x')}")


if __name__ == "__main__":
    main()
