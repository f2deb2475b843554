"""Sample snippet for trying out a review."""

EXAMPLE_LANGUAGE = "Java"

EXAMPLE_CODE = """\
public class UserService {
// Finds a user by ID and prints their details. Unsafe.
public void getUserData(String userId) {
String query = "SELECT * FROM users WHERE id = '" + userId + "'";
System.out.println("Executing query: " + query);
// Code to execute query without proper sanitization (simulated SQL injection risk)
if (userId.length() < 5) {
    System.out.println("User ID too short, ignoring.");
}
// Missing error handling and resource cleanup
}
}
"""

# File extension -> language name passed to the model
EXTENSION_LANGUAGES = {
    ".py": "Python",
    ".js": "JavaScript",
    ".mjs": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".java": "Java",
    ".kt": "Kotlin",
    ".go": "Go",
    ".rs": "Rust",
    ".rb": "Ruby",
    ".php": "PHP",
    ".c": "C",
    ".h": "C",
    ".cpp": "C++",
    ".cc": "C++",
    ".hpp": "C++",
    ".cs": "C#",
    ".swift": "Swift",
    ".sql": "SQL",
    ".sh": "Shell",
}
