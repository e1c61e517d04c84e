"""The game's scenes: title, instructions, options, selection, level, editor, limit, passed and win."""