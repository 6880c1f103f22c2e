from dotenv import load_dotenv
import os
import sqlite3

from insertunit.abstract_syntax_tree.models import RawInsertClauseNode, RuleInsertClauseNode
from insertunit.compiler.insert_compiler import compile_insert

def main():
    # Load environment variables from .env file
    load_dotenv()

    db_path = os.getenv("SQLITE_DB_PATH", ":memory:")
    connection = sqlite3.connect(db_path)

    print("Creating table 'sample_users'...")
    connection.execute("DROP TABLE IF EXISTS sample_users")
    connection.execute("CREATE TABLE sample_users (id INTEGER PRIMARY KEY, name TEXT, age INTEGER)")

    # Rows may carry different keys; missing columns bind as NULL
    compiled = compile_insert(
        [
            RuleInsertClauseNode(
                table="sample_users",
                values=[{"name": "Alice", "age": 30}, {"name": "Bob"}, {"age": 41}],
            )
        ]
    )
    print(f"SQL: {compiled.sql}")
    print(f"Params: {compiled.params}")
    connection.execute(compiled.sql, compiled.params)

    raw = compile_insert(
        [RawInsertClauseNode(sql="INSERT INTO sample_users (name, age) VALUES (?, ?)", bindings=["Carol", 27])]
    )
    connection.execute(raw.sql, raw.params)
    connection.commit()

    for row in connection.execute("SELECT id, name, age FROM sample_users ORDER BY id"):
        print(row)

    connection.close()

if __name__ == "__main__":
    main()
