from aoc_helper import AocDay


day = AocDay(2015, 1)


@day.part1(examples=["(())", "()()", "(((", "))((((("])
def final_floor(instructions):
    return instructions.count("(") - instructions.count(")")


def first_basement_step(instructions):
    floor = 0
    for i, char in enumerate(instructions, start=1):
        floor += 1 if char == "(" else -1
        if floor < 0:
            return i
    raise ValueError("never reached the basement")


day.part2(first_basement_step, examples=[")", "()())"])


if __name__ == "__main__":
    day.test()
    day.run()
