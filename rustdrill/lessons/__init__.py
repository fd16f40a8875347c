"""Worked solutions to exercise topics: quizzes, basics, sequences, errors, maps, messages, iterators and records."""