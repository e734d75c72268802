"""File contents emitted by ``init`` and ``scaffold``."""

from __future__ import annotations

from mush.config import SESSION_ENV
from mush.models import DayIdentifier

WORKSPACE_MEMBERS = "solutions/*/*"

WORKSPACE_MANIFEST = f"""[workspace]
members = [
    "{WORKSPACE_MEMBERS}"
]
resolver = "2"
"""

GITIGNORE = """/target
**/target
.env
.DS_Store
**/*.rs.bk
**/input.txt
/logs
"""

ENV_TEMPLATE = f"""{SESSION_ENV}=your_session_cookie_here
"""

DAY_DEPENDENCIES = {
    "itertools": "0.10.5",
    "regex": "1.10.3",
}

SOLUTION_TEMPLATE = """fn main() {
    let input = include_str!("../input.txt");

    let start = std::time::Instant::now();
    println!("Part 1: {}", part1(input));
    println!("Time: {:.4}ms", start.elapsed().as_secs_f64() * 1000.0);

    let start = std::time::Instant::now();
    println!("Part 2: {}", part2(input));
    println!("Time: {:.4}ms", start.elapsed().as_secs_f64() * 1000.0);
}

fn part1(input: &str) -> usize {
    0
}

fn part2(input: &str) -> usize {
    0
}

#[cfg(test)]
mod tests {
    use super::*;

    #[test]
    fn test_part1_example() {
        let example_input = include_str!("../example.txt");
        assert_eq!(part1(example_input), 0);
    }
}
"""


def render_day_manifest(day_id: DayIdentifier) -> str:
    """Package manifest for one day, named so ``cargo run -p`` can target it."""

    dependencies = "\n".join(f'{name} = "{version}"' for name, version in DAY_DEPENDENCIES.items())
    return f"""[package]
name = "{day_id.package_name}"
version = "0.1.0"
edition = "2021"

[dependencies]
{dependencies}
"""
