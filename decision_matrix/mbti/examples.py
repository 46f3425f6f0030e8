# mbti/examples.py
"""Well-known people commonly typed as each MBTI archetype."""

from typing import Dict, List

from decision_matrix.models.enumerations import MBTIType

FAMOUS_PEOPLE_BY_MBTI: Dict[MBTIType, List[str]] = {
    MBTIType.INTJ: ["Elon Musk", "Mark Zuckerberg", "Stephen Hawking", "Nikola Tesla", "Michelle Obama"],
    MBTIType.ENTJ: ["Steve Jobs", "Margaret Thatcher", "Jack Welch", "Gordon Ramsay", "Jim Carrey"],
    MBTIType.INTP: ["Albert Einstein", "Larry Page", "Bill Gates", "Isaac Newton", "Marie Curie"],
    MBTIType.ENTP: ["Leonardo da Vinci", "Richard Feynman", "Barack Obama", "Thomas Edison", "Celine Dion"],
    MBTIType.INFJ: ["Martin Luther King Jr.", "Nelson Mandela", "Mahatma Gandhi", "Taylor Swift", "Plato"],
    MBTIType.ENFJ: ["Oprah Winfrey", "Barack Obama", "Jennifer Lawrence", "Maya Angelou", "Neil deGrasse Tyson"],
    MBTIType.INFP: ["J.R.R. Tolkien", "William Shakespeare", "Johnny Depp", "Princess Diana", "Bob Dylan"],
    MBTIType.ENFP: ["Robin Williams", "Walt Disney", "Robert Downey Jr.", "Ellen DeGeneres", "Mark Twain"],
    MBTIType.ISTJ: ["Jeff Bezos", "Queen Elizabeth II", "Warren Buffett", "George Washington", "Hermione Granger"],
    MBTIType.ESTJ: ["Henry Ford", "Sheryl Sandberg", "Martha Stewart", "John D. Rockefeller", "Sonia Sotomayor"],
    MBTIType.ISFJ: ["Mother Teresa", "Kate Middleton", "Beyoncé", "Rosa Parks", "Dr. Fauci"],
    MBTIType.ESFJ: ["Taylor Swift", "Jennifer Garner", "Bill Clinton", "Hugh Jackman", "Steve Harvey"],
    MBTIType.ISTP: ["Michael Jordan", "Tom Cruise", "Clint Eastwood", "Amelia Earhart", "Erwin Rommel"],
    MBTIType.ESTP: ["Donald Trump", "Ernest Hemingway", "Madonna", "Eddie Murphy", "Winston Churchill"],
    MBTIType.ISFP: ["Michael Jackson", "Frida Kahlo", "Keanu Reeves", "David Bowie", "Marilyn Monroe"],
    MBTIType.ESFP: ["Adele", 'Dwayne "The Rock" Johnson', "Jamie Foxx", "Miley Cyrus", "Elvis Presley"],
}
