import os
import sys

DELIM = "&-=-&"

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

try:
    from LinkedList import LinkedList
except Exception as e:
    print("Failed to import LinkedList:", e)
    sys.exit(2)


def print_section(name: str):
    print(f"{DELIM} {name}")


def print_list(lst: "LinkedList", label: str = ""):
    if label:
        print(f"{label}: ", end="")
    print(f"{lst.to_string()} size={lst.size()}")


# ───────────────────────── tasks ─────────────────────────

def task1_build():
    print_section("start-task1")

    lst = LinkedList()
    print_section("empty-list")
    print_list(lst, "empty")

    print_section("append_prepend")
    lst.append(10)
    lst.append(20)
    lst.prepend(5)
    print_list(lst, "after-append")

    print_section("insert_at")
    print("ok=" + str(lst.insert_at(15, 2)))   # (5) (10) (15) (20)
    print("ok=" + str(lst.insert_at(99, 42)))  # out of range, no-op
    print_list(lst, "after-insert")

    print_section("at")
    for i in (0, 2, lst.size()):
        node = lst.at(i)
        print(f"at({i})={node.value if node is not None else 'N/A'}")


def task2_remove_search():
    print_section("start-task2")

    lst = LinkedList()
    for v in (5, 10, 15, 20):
        lst.append(v)
    print_list(lst, "seed")

    print_section("remove_at")
    print(f"removed={lst.remove_at(0)}")   # 5
    print(f"removed={lst.remove_at(7)}")   # out of range
    print_list(lst, "after-remove")

    print_section("pop")
    print(f"popped={lst.pop()}")           # 20
    print_list(lst, "after-pop")

    print_section("search")
    print(f"contains(10)={lst.contains(10)} contains(20)={lst.contains(20)}")
    print(f"find(15)={lst.find(15)} find(20)={lst.find(20)}")

    print_section("drain")
    while not lst.is_empty():
        lst.pop()
    print(f"popped={lst.pop()}")
    print_list(lst, "drained")


# ───────────────────────── entry ─────────────────────────

def main(argv=None):
    argv = sys.argv if argv is None else argv
    which = argv[1] if len(argv) >= 2 else ""
    if which == "task1":
        task1_build(); return 0
    if which == "task2":
        task2_remove_search(); return 0
    # default: run all
    task1_build()
    task2_remove_search()
    return 0


if __name__ == "__main__":
    sys.exit(main())
