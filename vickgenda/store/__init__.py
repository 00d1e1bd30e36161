"""SQLite-backed persistence for terms, students, grades and lessons."""