"""
OOD Principles In Python
A short cheat-sheet with examples for the five S.O.L.I.D. principles.

Principles:
- 🔐 Single Responsibility (pod bay door)
- ✋ Open-Closed (laser beam, rocket launcher)
- 👥 Liskov Substitution (request errors)
- 🍴 Interface Segregation (ISS, SpaceX CRS-8, drone ship)
- 🔩 Dependency Inversion (DeLorean, Doc Brown)
"""
