"""English strings for the stadium tracker bot."""

EN_STRINGS = {
    # === WELCOME / MENU ===
    "welcome_guest": (
        "🏟 <b>Stadium Tracker</b>\n\n"
        "Keep track of every stadium and arena you have been to.\n"
        "Log in or create an account to get started."
    ),
    "welcome_back": "👋 {name}!\n\nWhat would you like to do?",
    "help": (
        "<b>Commands</b>\n"
        "/stadiums - your stadiums, grouped by sport\n"
        "/add - record a stadium visit\n"
        "/profile - your stats\n"
        "/login, /register, /logout\n"
        "/cancel - abort the current step"
    ),
    "fallback": "I didn't get that. Pick something from the menu 👇",
    "login_required": "🔒 Please log in first.",
    "cancelled": "Cancelled.",

    # === MENU BUTTONS ===
    "btn_list": "📋 My stadiums",
    "btn_map": "🗺 Map",
    "btn_add": "➕ Add stadium",
    "btn_profile": "👤 Profile",
    "btn_logout": "🚪 Logout",
    "btn_login": "🔑 Login",
    "btn_register": "📝 Register",
    "btn_menu": "← Menu",
    "btn_back_to_list": "📋 Back to list",
    "btn_web_map": "🌐 Open full map",
    "btn_manual": "✏️ Enter manually",
    "btn_cancel": "Cancel",
    "btn_save": "✓ Save",
    "btn_edit_name": "Edit name",
    "btn_edit_city": "Edit city",
    "btn_edit_sport": "Edit sport",

    # === AUTH ===
    "already_logged_in": "You're already logged in as <b>{name}</b>.",
    "ask_email": "📧 What's your email?",
    "ask_password": "🔑 And your password? (I'll delete the message right away)",
    "ask_username": "👤 Pick a username:",
    "ask_new_password": "🔑 Choose a password (at least 6 characters). I'll delete the message right away.",
    "invalid_email": "That doesn't look like an email. Try again:",
    "invalid_username": "Username must be 2-50 characters. Try again:",
    "password_too_short": "Password must be at least 6 characters. Try again:",
    "login_success": "✅ Welcome back, <b>{name}</b>!",
    "register_success": "🎉 Account created. Welcome, <b>{name}</b>!",
    "logout_success": "👋 Logged out.",
    "auth_failed": "⚠️ {error}",

    # === LIST / MAP ===
    "list_header": "🏟 <b>Your stadiums</b> ({count})",
    "list_empty": "No stadiums yet. Add one to get started!",
    "map_header": "🗺 <b>{count}</b> stadium(s) on the map above.",
    "map_skipped": "{count} without coordinates not shown.",
    "map_over_limit": "{count} more not shown (pin limit is {limit}). Open the full map to see all.",
    "map_empty": "None of your stadiums has coordinates yet. Pick one from the search when adding to get a pin.",
    "map_disabled": "The map is turned off.",
    "visited": "Visited ✓",
    "to_visit": "To visit",
    "deleted": "Deleted.",
    "marked_visited": "Marked as visited.",
    "marked_to_visit": "Marked as to visit.",

    # === ADD ===
    "add_search_prompt": (
        "➕ <b>Add a stadium</b>\n\n"
        "Type a team or league to search (e.g. <i>Red Sox</i>, <i>NHL</i>), "
        "or enter the details manually."
    ),
    "add_no_matches": "No teams or leagues match <b>{query}</b>. Try again or enter manually.",
    "add_matches": "Found {count} match(es) for <b>{query}</b>:",
    "ask_stadium_name": "Stadium name?",
    "ask_stadium_city": "City?",
    "ask_stadium_sport": "Sport? (e.g. Baseball, Football, Soccer, Hockey)",
    "add_draft": (
        "<b>New stadium</b>\n\n"
        "🏟 {name}\n"
        "📍 {city}\n"
        "🏅 {sport}\n"
        "{coords}"
    ),
    "add_saving": "Adding...",
    "add_success": "✅ <b>{name}</b> added!",
    "add_failed": "⚠️ {error}",

    # === PROFILE ===
    "profile": (
        "👤 <b>Profile</b>\n\n"
        "Username: <b>{username}</b>\n"
        "Email: {email}\n"
        "User ID: <code>{user_id}</code>\n\n"
        "📊 <b>Stadium stats</b>\n"
        "Total: <b>{total}</b>\n"
        "Visited: <b>{visited}</b>\n"
        "To visit: <b>{to_visit}</b>\n"
        "Cities: <b>{cities}</b>"
    ),
    "profile_by_sport": "\n\n<b>By sport</b>\n{lines}",
    "profile_recent": "\n\n<b>Your stadiums</b>\n{lines}",
    "profile_empty": "\n\nYou haven't added any stadiums yet. Tap ➕ to add some!",

    # === ERRORS ===
    "server_error": "⚠️ Something went wrong connecting to the server. Please try again in a minute.",
}
