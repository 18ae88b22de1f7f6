"""
Competency-based curriculum framework data.

One entry per grade, three terms per grade. Each subject is tagged with its
scoring scheme ('ee_me_ae_be' for descriptive levels, 'cat_endterm' for
CAT1/CAT2/End-Term numeric composites) and split into numbered strands of
named sub-strands. Terms whose strands are not yet published carry an empty
strand list.

This module is plain data; curriculum.py builds the lookup tree from it once.
"""


PLAYGROUP_FRAMEWORK = {
    'grade': 'Playgroup',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Mathematics Activities',
                            'sub_strands': [
                                {'name': 'Recognize number 1-5'},
                                {'name': 'Colouring in the margin'},
                                {'name': 'Rote count 1-10'},
                                {'name': 'Pattern'},
                                {'name': 'Sorting and grouping'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Language Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Language Activities',
                            'sub_strands': [
                                {'name': 'Recognize sounds'},
                                {'name': 'Eye-hand co-ordination skills'},
                                {'name': 'Colouring sound'},
                                {'name': 'Auditory memory'},
                                {'name': 'Self-expression'},
                                {'name': 'Carving for books'},
                                {'name': 'Writing posture'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Creative Activities',
                            'sub_strands': [
                                {'name': 'Hold writing instruments'},
                                {'name': 'Drawing'},
                                {'name': 'Scribbling and doodling'},
                                {'name': 'Colouring in the margin'},
                                {'name': 'Modelling painting'},
                                {'name': 'Printing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'CRE',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CRE',
                            'sub_strands': [
                                {'name': "Knowing God's name"},
                                {'name': "God's creating"},
                                {'name': 'Myself'},
                                {'name': 'My family'},
                                {'name': 'Prayer'},
                                {'name': 'Bible'},
                                {'name': 'Sing songs'},
                                {'name': 'Bible stories'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Music Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Music Activities',
                            'sub_strands': [
                                {'name': 'Musical rhythms'},
                                {'name': 'Singing games'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Environmental Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Environmental Activities',
                            'sub_strands': [
                                {'name': 'Dressing'},
                                {'name': 'Turn pages in a book'},
                                {'name': 'Hold writing instruments'},
                                {'name': 'Toilet training'},
                                {'name': 'Washing hands'},
                                {'name': 'Cleaning the nose'},
                                {'name': 'Feeding self'},
                                {'name': 'Gross motor skills'},
                                {'name': 'Walk in the line'},
                                {'name': 'Walk backwards'},
                                {'name': 'Throwing objects'},
                                {'name': 'Catch a large ball'},
                                {'name': 'Jump with two feet'},
                                {'name': 'Kick the ball'},
                                {'name': 'Sliding'},
                                {'name': 'Climbing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Emotional Development',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Emotional Development',
                            'sub_strands': [
                                {'name': 'Temper turns'},
                                {'name': 'Show empathy'},
                                {'name': 'Turn taking'},
                                {'name': "Understanding both own and other's emotions"},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Social Development',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Social Development',
                            'sub_strands': [
                                {'name': 'Interaction with other children'},
                                {'name': 'Developing friendship'},
                                {'name': 'Tattles when wronged'},
                                {'name': 'Sharing'},
                                {'name': 'Co-operative play'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Outdoor Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'Outdoor Activities',
                            'sub_strands': [
                                {'name': 'Pool safety and hygiene'},
                                {'name': 'Water orientation'},
                                {'name': 'Use of safety materials'},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            'term': 2,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Language Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'CRE', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Music Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Emotional Development', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Social Development', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Outdoor Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
        {
            'term': 3,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Language Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'CRE', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Music Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Emotional Development', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Social Development', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Outdoor Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
    ],
}


PP1_FRAMEWORK = {
    'grade': 'PP1',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'MYSELF',
                            'sub_strands': [
                                {'name': 'Pre-Number Activities', 'details': ['Sorting and grouping', 'Matching and pairing', 'Ordering', 'Patterns']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MY FAMILY',
                            'sub_strands': [
                                {'name': 'Numbers', 'details': ['Rote counting', 'Number recognition', 'Capacity']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'GREETINGS AND FAREWELL',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Greeting and farewell'},
                                {'name': 'Reading - Readiness'},
                                {'name': 'Writing'},
                                {'name': 'Print awareness'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MYSELF',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Self-awareness'},
                                {'name': 'Listening for enjoyment'},
                                {'name': 'Reading – book handling'},
                                {'name': 'Reading posture'},
                                {'name': 'Writing - posture'},
                                {'name': 'Prewriting skills'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'MY FAMILY',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Active Listening'},
                                {'name': 'Self-expression'},
                                {'name': 'Polite Language'},
                                {'name': 'Reading'},
                                {'name': 'Phonic awareness'},
                                {'name': 'Writing – eye hand coordination'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Environmental Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'MYSELF',
                            'sub_strands': [
                                {'name': 'Self-awareness'},
                                {'name': 'External body parts'},
                                {'name': 'Hand washing'},
                                {'name': 'Brushing teeth'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MY FAMILY',
                            'sub_strands': [
                                {'name': 'Family members'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Our God'},
                                {'name': 'God Our Creator'},
                                {'name': 'God our Loving father'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE HOLY BIBLE',
                            'sub_strands': [
                                {'name': 'Bible as a Holy Book'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'MYSELF',
                            'sub_strands': [
                                {'name': 'Scribbling'},
                                {'name': 'Action songs'},
                                {'name': 'Play activities'},
                                {'name': 'Printing', 'details': ['Hand printing', 'Foot printing']},
                                {'name': 'Singing game'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MY FAMILY',
                            'sub_strands': [
                                {'name': 'Colouring'},
                                {'name': 'Recite simple rhymes'},
                                {'name': 'Movement'},
                                {'name': 'Joining Dots'},
                                {'name': 'Singing game'},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            'term': 2,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
        {
            'term': 3,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
    ],
}


PP2_FRAMEWORK = {
    'grade': 'PP2',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'OUR NEIGHBOURHOOD',
                            'sub_strands': [
                                {'name': 'Pre-Number Activities', 'details': ['Sorting and grouping', 'Matching and pairing', 'Ordering', 'Patterns']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'OUR SCHOOL',
                            'sub_strands': [
                                {'name': 'Numbers', 'details': ['Rote counting', 'Number recognition', 'Capacity']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'GREETINGS AND FAREWELL',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Greeting and farewell'},
                                {'name': 'Reading - Readiness'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'OUR NEIGHBOURHOOD',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Listening for comprehension'},
                                {'name': 'News telling'},
                                {'name': 'Reading – book handling'},
                                {'name': 'Reading readiness'},
                                {'name': 'Letter recognition'},
                                {'name': 'Writing – letter writing and practice'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'OUR SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Active Listening'},
                                {'name': 'Self-expression'},
                                {'name': 'Reading - Print awareness and reading syllables'},
                                {'name': 'Writing – drawing pictures and writing syllables'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Environmental Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'MYSELF',
                            'sub_strands': [
                                {'name': 'External body parts and their uses'},
                                {'name': 'Cleaning the nose'},
                                {'name': 'Dressing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'OUR FAMILY',
                            'sub_strands': [
                                {'name': 'Food eaten'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Our God'},
                                {'name': 'God Our Creator'},
                                {'name': 'God our Loving father'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE HOLY BIBLE',
                            'sub_strands': [
                                {'name': 'Bible as a Holy Book'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATIVE ARTS',
                            'sub_strands': [
                                {'name': 'Scribbling'},
                                {'name': 'Colouring'},
                                {'name': 'Printing'},
                                {'name': 'Singing game'},
                                {'name': 'Movement'},
                                {'name': 'Joining Dots'},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            'term': 2,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
        {
            'term': 3,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
    ],
}


GRADE1_FRAMEWORK = {
    'grade': 'Grade 1',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Pre-number activities', 'details': ['Sorting and grouping, matching']},
                                {'name': 'Whole Numbers'},
                                {'name': 'Addition'},
                                {'name': 'Subtraction'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MEASUREMENT',
                            'sub_strands': [
                                {'name': 'Length'},
                                {'name': 'Mass'},
                                {'name': 'Capacity'},
                                {'name': 'Time', 'details': ['Days of the week', 'Relation of days of the week & activities', 'Months of the year']},
                                {'name': 'Money', 'details': ['Kenyan currency coins and notes', 'Counting coins', 'Using money to buy']},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'GEOMETRY',
                            'sub_strands': [
                                {'name': 'Lines'},
                                {'name': 'Shapes'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'WELCOME AND GREETINGS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'FAMILY',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'HOME',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 5,
                            'theme': 'TIME',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'DARASANI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'FAMILIA',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'TARAKIMU',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'SIKU ZA WIKI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Indigenous Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'THE HOME',
                            'sub_strands': [
                                {'name': 'Listening and speaking (Instruction)'},
                                {'name': 'Reading (Picture reading)'},
                                {'name': 'Writing (Letters of alphabet)'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking (Word formation)'},
                                {'name': 'Reading (reading words)'},
                                {'name': 'Writing – handwriting'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Environmental Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SOCIAL ENVIRONMENT',
                            'sub_strands': [
                                {'name': 'Cleaning my body', 'details': ['Materials for cleaning body parts', 'Cleaning different body parts']},
                                {'name': 'Our home', 'details': ['Materials for cleaning the home', 'Common accidents at home', 'Cleaning the home']},
                                {'name': 'Family needs', 'details': ['Basic needs', 'Physical needs', 'Categories of foods from plants & animals', 'Selecting suitable foods']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Self-awareness', 'details': ['Identifying their uniqueness', 'Stating their gender']},
                                {'name': 'My family', 'details': ['Naming members of the family', 'Praying with family', 'Items shared at home']},
                                {'name': 'Creation of plants and animals', 'details': ['Naming plants and animals', 'Keeping the home environment clean']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE HOLY BIBLE',
                            'sub_strands': [
                                {'name': 'The word of God', 'details': ['Ways of handling the bible', 'The two divisions of the bible', 'First two books of the New Testament']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION AND EXECUTING',
                            'sub_strands': [
                                {'name': 'Jumping', 'details': ['Jump for height and distance']},
                                {'name': 'Imitating sounds'},
                                {'name': 'Rhythm', 'details': ['Beat', 'Body percussion', 'Body percussion accompaniment']},
                                {'name': 'Drawing', 'details': ['Lines, straight, wavy, zigzag and curved lines', 'Direction: vertical, diagonal and horizontal']},
                                {'name': 'Stretching', 'details': ['Body parts involved in stretching', 'Performing stretching']},
                                {'name': 'Making toys for playing games'},
                                {'name': 'Painting and coloring', 'details': ['Material (paper, fabric, paints, crayon)', 'Tool (sponge, palate, and brushes)']},
                                {'name': 'Melody', 'details': ['Melodic sounds', 'Echoing melodic pattern']},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            'term': 2,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Kiswahili', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Indigenous Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
        {
            'term': 3,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Kiswahili', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Indigenous Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
    ],
}


GRADE2_FRAMEWORK = {
    'grade': 'Grade 2',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Number concept'},
                                {'name': 'Whole Numbers'},
                                {'name': 'Addition'},
                                {'name': 'Subtraction'},
                                {'name': 'Multiplication'},
                                {'name': 'Division'},
                                {'name': 'Fractions'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MEASUREMENT',
                            'sub_strands': [
                                {'name': 'Length'},
                                {'name': 'Mass'},
                                {'name': 'Capacity'},
                                {'name': 'Time'},
                                {'name': 'Money'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'GEOMETRY',
                            'sub_strands': [
                                {'name': 'Lines'},
                                {'name': 'Shapes'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'ACTIVITIES IN THE HOME',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'TRANSPORT',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'TIMES AND MONTHS OF THE YEAR',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 5,
                            'theme': 'SHOPPING',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SHULENI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'HAKI ZANGU',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'LISHE BORA',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'USAFIRI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Indigenous Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'THINGS FOUND IN SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking (Instruction)'},
                                {'name': 'Reading (Picture reading)'},
                                {'name': 'Writing (names of items)'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'ACTIVITIES AT SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking (riddles)'},
                                {'name': 'Reading'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Environmental Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SOCIAL ENVIRONMENT',
                            'sub_strands': [
                                {'name': 'Cleaning my body'},
                                {'name': 'Our home'},
                                {'name': 'Family needs'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Self-awareness'},
                                {'name': 'My family'},
                                {'name': 'Creation of plants and animals'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE HOLY BIBLE',
                            'sub_strands': [
                                {'name': 'The word of God'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION AND EXECUTING',
                            'sub_strands': [
                                {'name': 'Jumping'},
                                {'name': 'Rhythm'},
                                {'name': 'Drawing'},
                                {'name': 'Painting and coloring'},
                                {'name': 'Melody'},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            'term': 2,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Kiswahili', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Indigenous Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
        {
            'term': 3,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Kiswahili', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Indigenous Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
    ],
}


GRADE3_FRAMEWORK = {
    'grade': 'Grade 3',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Number concept'},
                                {'name': 'Whole Numbers'},
                                {'name': 'Addition'},
                                {'name': 'Subtraction'},
                                {'name': 'Multiplication'},
                                {'name': 'Division'},
                                {'name': 'Fractions'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'MEASUREMENT',
                            'sub_strands': [
                                {'name': 'Length'},
                                {'name': 'Mass'},
                                {'name': 'Capacity'},
                                {'name': 'Time'},
                                {'name': 'Money'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'GEOMETRY',
                            'sub_strands': [
                                {'name': 'Lines'},
                                {'name': 'Shapes'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'ACTIVITIES AT HOME & SCHOOL',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'SHARING DUTIES & RESPONSIBILITIES',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'ETIQUETTE',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'CHILD RIGHTS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 5,
                            'theme': 'OCCUPATION',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Language use'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'UZALENDO',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'SHAMBANI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'MIEZI YA MWAKA',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'KAZI MBALIMBALI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Sarufi'},
                                {'name': 'Kuandika'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Indigenous Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'INTRODUCING SELF & OTHERS',
                            'sub_strands': [
                                {'name': 'Listening and speaking (Imitating expression)'},
                                {'name': 'Reading (Independent reading)'},
                                {'name': 'Writing (sentence formation)'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE COMMUNITY',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Environmental Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SOCIAL ENVIRONMENT',
                            'sub_strands': [
                                {'name': 'Cleaning my body'},
                                {'name': 'Our home'},
                                {'name': 'Family needs'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Self-awareness'},
                                {'name': 'My family'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE HOLY BIBLE',
                            'sub_strands': [
                                {'name': 'The word of God'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION AND EXECUTING',
                            'sub_strands': [
                                {'name': 'Jumping'},
                                {'name': 'Rhythm'},
                                {'name': 'Drawing'},
                                {'name': 'Painting and coloring'},
                                {'name': 'Melody'},
                            ],
                        },
                    ],
                },
            ],
        },
        {
            'term': 2,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Kiswahili', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Indigenous Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
        {
            'term': 3,
            'subjects': [
                {'subject': 'Mathematics Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'English Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Kiswahili', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Indigenous Language Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Environmental Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
    ],
}


def _grade4_subjects(scoring_type):
    return [
        {'subject': 'Mathematics Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'English Language Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Kiswahili', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Indigenous Language Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Social Studies Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Science & Technology Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Agriculture & Nutrition Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Creative Arts Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Christian Religious Education Activities', 'scoring': scoring_type, 'strands': []},
    ]


GRADE4_FRAMEWORK = {
    'grade': 'Grade 4',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Whole Numbers', 'details': ['Place value', 'Reading and writing numbers', 'Ordering numbers', 'Rounding numbers', 'Factors of numbers', 'Using even and odd numbers', 'Rep. Hindu Arabic numbers using roman numbers', 'Making patterns']},
                                {'name': 'Addition'},
                                {'name': 'Subtraction'},
                                {'name': 'Multiplication'},
                                {'name': 'Division'},
                                {'name': 'Fractions'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'THE FAMILY',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'FAMILY CELEBRATIONS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'ETIQUETTE',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'ACCIDENTS: FIRST AID',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 5,
                            'theme': 'NUTRITION- BALANCED DIET',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NYUMBANI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Kuandika'},
                                {'name': 'Sarufi'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'NIDHAMU MEZANI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Kuandika'},
                                {'name': 'Sarufi'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'MAVAZI',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Kuandika'},
                                {'name': 'Sarufi'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'DIRA',
                            'sub_strands': [
                                {'name': 'Kusikiliza na kuzungumza'},
                                {'name': 'Kusoma'},
                                {'name': 'Kuandika'},
                                {'name': 'Sarufi'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Indigenous Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CULTURAL FOODS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Writing (Letters of alphabet)'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'WEATHER',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'PERSONAL SAFETY',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Social Studies Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NATURAL & BUILT ENVIRONMENTS',
                            'sub_strands': [
                                {'name': 'Compass direction'},
                                {'name': 'Location & size of the county'},
                                {'name': 'Physical features in the county'},
                                {'name': 'Seasons in the county'},
                                {'name': 'Historic built environments in the county'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'PEOPLE AND POPULATION',
                            'sub_strands': [
                                {'name': 'Interdependence of people'},
                                {'name': 'Population distribution'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Science & Technology Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'LIVING THINGS & THEIR ENVIRONMENT',
                            'sub_strands': [
                                {'name': 'Plants', 'details': ['Characteristics of plants as living things', 'Functions of external parts of plants']},
                                {'name': 'Animals', 'details': ['Characteristics of animals as living things', 'Vertebrates and invertebrates']},
                                {'name': 'Human digestive system', 'details': ['Parts of the human digestive system', 'Healthy digestive system', 'Symptoms of unhealthy digestive system']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Agriculture & Nutrition Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CONSERVATION OF RESOURCES',
                            'sub_strands': [
                                {'name': 'Soil conservation', 'details': ['Materials for making compost manure', 'Preparing compost manure']},
                                {'name': 'Water conservation', 'details': ['Drip irrigation']},
                                {'name': 'Fuel conservation', 'details': ['Types of fuels used at home', 'Using and conserving fuels in cooking']},
                                {'name': 'Conserving wild animals', 'details': ['Small wild animals that destroy crops', 'Constructing a scarecrow']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'FOOD PRODUCTION PROCESSES',
                            'sub_strands': [
                                {'name': 'Direct sowing of tiny seeds', 'details': ['Crops grown through direct sowing', 'Sowing tiny seeds']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION & EXECUTING',
                            'sub_strands': [
                                {'name': 'Percussion Musical instruments', 'details': ['Identifying: name, community, method of playing', 'Parts of percussion', 'Classifying melodic, non melodic']},
                                {'name': 'Improvised rhythmic pattern'},
                                {'name': 'Making sticks (cutting, trimming, burning, cooling)'},
                                {'name': 'Tonal value – smudge technique'},
                                {'name': 'Netball', 'details': ['Passes', 'Catching (double handed)']},
                                {'name': 'Macramé technique (overhand knot)'},
                                {'name': 'Painting and Montage', 'details': ['Colour classification', 'Colour value', 'Montage – subject matter, overlapping neatness']},
                                {'name': 'Rhythm', 'details': ['Note values: crotchet, pair of quavers and their rests', 'French rhythm names']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Creation stories'},
                                {'name': 'Responsibility over creation'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE HOLY BIBLE',
                            'sub_strands': [
                                {'name': 'Books of the Bible'},
                            ],
                        },
                    ],
                },
            ],
        },
        {'term': 2, 'subjects': _grade4_subjects('cat_endterm')},
        {'term': 3, 'subjects': _grade4_subjects('cat_endterm')},
    ],
}


def _grade5_subjects(scoring_type):
    return [
        {'subject': 'Mathematics Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'English Language Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Kiswahili', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Indigenous Language Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Social Studies Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Science & Technology Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Agriculture & Nutrition Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Creative Arts Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Christian Religious Education Activities', 'scoring': scoring_type, 'strands': []},
    ]


GRADE5_FRAMEWORK = {
    'grade': 'Grade 5',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Whole Numbers', 'details': ['Use of total & place value', 'Number symbols', 'Reading and writing numbers', 'Ordering numbers', 'Rounding off numbers', 'Divisibility test', 'HCF, GCD & LCM']},
                                {'name': 'Addition'},
                                {'name': 'Subtraction'},
                                {'name': 'Multiplication'},
                                {'name': 'Division'},
                                {'name': 'Fractions'},
                                {'name': 'Decimals'},
                                {'name': 'Simple equations'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CHILD RIGHTS & RESPONSIBILITY',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'NATIONAL CELEBRATIONS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'ETIQUETTE- TABLE MANNERS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 4,
                            'theme': 'ROAD ACCIDENTS- PREVENTION',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                        {
                            'number': 5,
                            'theme': 'TRADITIONAL FOODS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Reading'},
                                {'name': 'Grammar in use'},
                                {'name': 'Writing'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'MAPISHI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 2, 'theme': 'HUDUMA YA KWANZA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 3, 'theme': 'MAPAMBO', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 4, 'theme': 'SAA NA MAJIRA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                    ],
                },
                {
                    'subject': 'Indigenous Language Activities',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'MY CULTURE- ATTIRE', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Writing (Letters of alphabet)'}]},
                        {'number': 2, 'theme': 'ENVIRONMENTAL AWARENESS', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Writing'}]},
                    ],
                },
                {'subject': 'Social Studies Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Science & Technology Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Agriculture & Nutrition Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'ee_me_ae_be', 'strands': []},
            ],
        },
        {'term': 2, 'subjects': _grade5_subjects('ee_me_ae_be')},
        {'term': 3, 'subjects': _grade5_subjects('ee_me_ae_be')},
    ],
}


def _grade6_subjects(scoring_type):
    return [
        {'subject': 'Mathematics Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'English Language Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Kiswahili', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Indigenous Language Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Social Studies Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Science & Technology Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Agriculture & Nutrition Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Creative Arts Activities', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Christian Religious Education Activities', 'scoring': scoring_type, 'strands': []},
    ]


GRADE6_FRAMEWORK = {
    'grade': 'Grade 6',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Whole Numbers', 'details': ['Place value & Total value', 'Number symbols', 'Reading and writing numbers', 'Ordering numbers', 'Rounding off numbers', 'Applying squares of whole numbers', 'Applying square roots of perfect squares']},
                                {'name': 'Multiplication'},
                                {'name': 'Division'},
                                {'name': 'Fraction'},
                                {'name': 'Decimal'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {'number': 1, 'theme': 'CHILD LABOUR', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 2, 'theme': 'CULTURAL & RELIGIOUS CELEBRATIONS', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 3, 'theme': 'ETIQUETTE - TELEPHONE', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 4, 'theme': 'EMERGENCY RESCUE SERVICES', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 5, 'theme': 'OUR TOURIST ATTRACTIONS', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {'number': 1, 'theme': 'VIUNGO VYA MWILI VYA NDANI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 2, 'theme': 'MICHEZO', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 3, 'theme': 'MAHUSIANO', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 4, 'theme': 'MISIMU', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                    ],
                },
                {
                    'subject': 'Indigenous Language Activities',
                    'scoring': 'cat_endterm',
                    'strands': [
                        {'number': 1, 'theme': 'CEREMONIES & FESTIVALS', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Writing'}]},
                        {'number': 2, 'theme': 'ENVIRONMENTAL CONSERVATION', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Writing'}]},
                    ],
                },
                {'subject': 'Social Studies Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Science & Technology Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Agriculture & Nutrition Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Creative Arts Activities', 'scoring': 'cat_endterm', 'strands': []},
                {'subject': 'Christian Religious Education Activities', 'scoring': 'cat_endterm', 'strands': []},
            ],
        },
        {'term': 2, 'subjects': _grade6_subjects('cat_endterm')},
        {'term': 3, 'subjects': _grade6_subjects('cat_endterm')},
    ],
}


def _jss_subjects(scoring_type):
    return [
        {'subject': 'Mathematics', 'scoring': scoring_type, 'strands': []},
        {'subject': 'English Language', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Kiswahili', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Social Studies', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Integrated Science', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Agriculture & Nutrition', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Creative Arts', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Pre-Technical Studies', 'scoring': scoring_type, 'strands': []},
        {'subject': 'Christian Religious Education', 'scoring': scoring_type, 'strands': []},
    ]


GRADE7_FRAMEWORK = {
    'grade': 'Grade 7',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Whole Numbers', 'details': ['Place value and total value', 'Reading and writing numbers', 'Rounding off numbers', 'Classifying numbers', 'Number sequence']},
                                {'name': 'Factors'},
                                {'name': 'Fractions'},
                                {'name': 'Decimals'},
                                {'name': 'Squares and square root'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'ALGEBRA',
                            'sub_strands': [
                                {'name': 'Algebraic expressions'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'PERSONAL RESPONSIBILITY', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 2, 'theme': 'SCIENCE & HEALTH EDUCATION', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 3, 'theme': 'HYGIENE', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 4, 'theme': 'LEADERSHIP', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 5, 'theme': 'FAMILY', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'USAFI WA KIBINAFSI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 2, 'theme': 'LISHE BORA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 3, 'theme': 'UHURU WA WANYAMA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 4, 'theme': 'AINA ZA MALIASILI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 5, 'theme': 'UNYANYASAJI WA KIJINSIA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                    ],
                },
                {
                    'subject': 'Social Studies',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SOCIAL STUDIES PERSONAL DEVELOPMENT',
                            'sub_strands': [
                                {'name': 'Self-exploration'},
                                {'name': 'Entrepreneurial opportunities in SST'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'PEOPLE AND POPULATION',
                            'sub_strands': [
                                {'name': 'Human origin'},
                                {'name': 'Early civilization'},
                                {'name': 'Slavery and servitude'},
                                {'name': 'Socio-economic org. of selected African communities'},
                                {'name': 'Origin of money'},
                                {'name': 'Human diversity & interpersonal relationships'},
                                {'name': 'Peaceful conflict resolution'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Integrated Science',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SCIENTIFIC INVESTIGATION',
                            'sub_strands': [
                                {'name': 'Introduction to integrated science', 'details': ['Components of integrated science', 'Importance of science in daily life']},
                                {'name': 'Laboratory safety', 'details': ['Common hazards & their symbols in the laboratory', 'Common accidents in the laboratory', 'Safety measures in the laboratory']},
                                {'name': 'Laboratory apparatus & instruments', 'details': ['Basic skills in science', 'Laboratory instrument & apparatus', 'S.I Units']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Agriculture & Nutrition',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CONSERVATION OF RESOURCES',
                            'sub_strands': [
                                {'name': 'Controlling soil pollution', 'details': ['Causes of soil pollution in gardening', 'Controlling soil pollution']},
                                {'name': 'Constructing water retention structures', 'details': ['Surface run off in gardening', 'Constructing water retention structures']},
                                {'name': 'Conserving nutrients', 'details': ['Ways of conserving vitamins & mineral salts in vegetables', 'Conserve nutrients in vegetables']},
                                {'name': 'Growing trees', 'details': ['Importance of trees in conserving the environment', 'Planting trees']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'FOOD PRODUCTION PROCESSES',
                            'sub_strands': [
                                {'name': 'Preparing planting site & establishing crop', 'details': ['Preparing a suitable tilth']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'FOUNDATIONS OF CA&S',
                            'sub_strands': [
                                {'name': 'Introduction to CA&S', 'details': ['Categories of CA&S', 'Relationship among categories of CA&S', 'Creating a chart on categories of CA&S']},
                                {'name': 'Components of CA&S', 'details': ['Elements & principles of art', 'Elements of a story', 'Coordination, strength & physical fitness', 'Rhythm & pitch in music']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'CREATING & PERFORMING CA&S',
                            'sub_strands': [
                                {'name': 'Drawing and painting', 'details': ['Drawing lines, tone and balance', 'Painting cool/warm colours']},
                                {'name': 'Values and rests'},
                                {'name': 'Variation of note'},
                                {'name': 'Body movements'},
                                {'name': 'French rhythm names'},
                                {'name': 'Athletics', 'details': ['Javelin appearance', 'Carving a javelin', 'Javelin throw']},
                                {'name': 'Melody', 'details': ['Qualities of a good melody', 'Melodies in G major', 'Melody in C major']},
                                {'name': 'Handball', 'details': ['Passes', 'Dribbling', 'Jump shot']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Pre-Technical Studies',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'FOUNDATION OF PRETECH STUD.',
                            'sub_strands': [
                                {'name': 'Introduction to Pretech studies', 'details': ['Components of Pretechnical studies', 'Role of Pretechnical studies']},
                                {'name': 'Safety in the work environment', 'details': ['Potential safety threat in a work environment', 'Safety rules & regulations in the work environment']},
                                {'name': 'Computer concepts', 'details': ['Characteristics of a computer', 'Classifying computers', 'Use of a computer to perform a task', 'ICT tools used in communication']},
                                {'name': 'Introduction to drawing', 'details': ['Importance of drawing as a means of communication', 'Difference between artistic & technical drawings', 'Printing numbers and letters', 'Drawing types of lines', 'Symbols and abbreviations used in drawing']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'C.R.E', 'sub_strands': [{'name': 'Importance of studying CRE'}]},
                        {
                            'number': 2,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Accounts of creation'},
                                {'name': 'Stewardship over creation'},
                                {'name': 'Responsibility over plants'},
                                {'name': 'Uses of natural resources'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'THE BIBLE',
                            'sub_strands': [
                                {'name': 'Functions of the bible'},
                                {'name': 'Divisions of the bible'},
                                {'name': 'Bible translations'},
                            ],
                        },
                    ],
                },
            ],
        },
        {'term': 2, 'subjects': _jss_subjects('ee_me_ae_be')},
        {'term': 3, 'subjects': _jss_subjects('ee_me_ae_be')},
    ],
}


GRADE8_FRAMEWORK = {
    'grade': 'Grade 8',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'Mathematics',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Integers', 'details': ['Integers in different situations', 'Representing integers in a number line', 'Operations involving addition & subtraction of integers']},
                                {'name': 'Fractions'},
                                {'name': 'Decimals'},
                                {'name': 'Squares and square roots'},
                                {'name': 'Rate, ratio, proportions & percentages'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'ALGEBRA',
                            'sub_strands': [
                                {'name': 'Algebraic expressions'},
                                {'name': 'Linear equations'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'English Language',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'HUMAN RIGHTS',
                            'sub_strands': [
                                {'name': 'Listening and speaking'},
                                {'name': 'Polite language / Telephone etiquette'},
                                {'name': 'Reading'},
                                {'name': 'Extensive reading: independent reading'},
                                {'name': 'Grammar in use', 'details': ['Word clauses', 'Compound nouns']},
                                {'name': 'Reading: Intensive reading; short stories'},
                                {'name': 'Writing', 'details': ['Writing legibly and neatly']},
                            ],
                        },
                        {'number': 2, 'theme': 'SCIENTIFIC INNOVATIONS', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Oral presentation: songs'}, {'name': 'Reading (extensive & intensive) poem'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 3, 'theme': 'POLLUTION', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 4, 'theme': 'CONSUMER ROLES & RESPONSIBILITIES', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 5, 'theme': 'RELATIONSHIPS: PEERS', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'USAFI WA SEHEMU ZA UMMA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 2, 'theme': 'MATUMIZI YAFAAYO YA DAWA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 3, 'theme': 'DHIKI ZINAZOKUMBA WANYAMA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 4, 'theme': 'MATUMIZI BORA YA MALIASILI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 5, 'theme': 'MAJUKUMU YA KIJINSIA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                    ],
                },
                {
                    'subject': 'Social Studies',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SOCIAL STUDIES AND PERSONAL MANAGEMENT',
                            'sub_strands': [
                                {'name': 'Self-improvement'},
                                {'name': 'Self-esteem assessment'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'COMMUNITY SERVICE LEARNING',
                            'sub_strands': [
                                {'name': 'Community service learning'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'PEOPLE AND RELATIONSHIP',
                            'sub_strands': [
                                {'name': 'Scientific theories about human origin'},
                                {'name': 'Early civilization'},
                                {'name': 'Trans Saharan slave trade'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Integrated Science',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'MIXTURES, ELEMENTS & COMPOUNDS',
                            'sub_strands': [
                                {'name': 'Elements & compounds', 'details': ['Atoms, elements, molecules & compounds', 'Symbols of common elements', 'Word equations for reactions of elements to form compounds', 'Uses of some common elements in the society']},
                                {'name': 'Physical and chemical changes', 'details': ['Kinetic theory of matter', 'Heating curve', 'Effects of impurities on Boiling point and melting point', 'Physical and chemical changes', 'Applications of physical & chemical changes in daily life']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Agriculture & Nutrition',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CONSERVATION OF RESOURCES',
                            'sub_strands': [
                                {'name': 'Soil conservation', 'details': ['Methods of soil conservation', 'Carrying out soil conservation activities']},
                                {'name': 'Water harvesting and storage', 'details': ['Ways of storing harvested water', 'Participating in harvesting water']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'FOOD PRODUCTION PROCESSES',
                            'sub_strands': [
                                {'name': 'Kitchen & Backyard gardening', 'details': ['Role of kitchen & backyard gardening', 'Establishing kitchen & backyard garden']},
                                {'name': 'Poultry rearing in a fold', 'details': ['Describing fold in poultry rearing', 'Constructing a fold', 'Rearing poultry in a fold']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'FOUNDATIONS OF CA&S',
                            'sub_strands': [
                                {'name': 'Introduction to CA&S', 'details': ['Roles of CA&S', 'Creating a storyboard', 'Painting background']},
                                {'name': 'Components of CA&S', 'details': ['Elements of a verse: character, theme, setting', 'Pitch: bass staff, ledger lines, G major, piano keyboard accidentals, middle C', 'Rhythm: semibreve, minim, crotchet, a pair of quaver', 'Elements of music and dance']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'CREATING & PERFORMING CA&S',
                            'sub_strands': [
                                {'name': 'Drawing and Painting', 'details': ['Drawing forms/shapes', 'Dominance (size variation)', 'Painting']},
                                {'name': 'Rhythm', 'details': ['Composing four bar rhythm', 'Note values and their corresponding rests', 'French rhythm names']},
                                {'name': 'Middle distance Races and Montage', 'details': ['Middle distance races', 'Montage (subjects, posture, center of interest, finishing)']},
                                {'name': 'Melody', 'details': ['Question and answer phrases in a melody', '4-bar melodies in G Major and time', 'Extending a melody using exact repetition, and varied repetition']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Pre-Technical Studies',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'FOUNDATION OF PRETECH STUD.',
                            'sub_strands': [
                                {'name': 'Fire safety'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Creation stories'},
                                {'name': 'Stewardship over creation'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE BIBLE',
                            'sub_strands': [
                                {'name': 'Selected teachings'},
                            ],
                        },
                    ],
                },
            ],
        },
        {'term': 2, 'subjects': _jss_subjects('ee_me_ae_be')},
        {'term': 3, 'subjects': _jss_subjects('ee_me_ae_be')},
    ],
}


GRADE9_FRAMEWORK = {
    'grade': 'Grade 9',
    'terms': [
        {
            'term': 1,
            'subjects': [
                {
                    'subject': 'English Language',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'CITIZENSHIP', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 2, 'theme': 'SCIENCE: FICTION', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 3, 'theme': 'ENVIRONMENTAL CONSERVATION', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 4, 'theme': 'CONSUMER PROTECTION', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                        {'number': 5, 'theme': 'RELATIONSHIPS: COMMUNITY', 'sub_strands': [{'name': 'Listening and speaking'}, {'name': 'Reading (extensive & intensive)'}, {'name': 'Grammar in use'}, {'name': 'Writing'}]},
                    ],
                },
                {
                    'subject': 'Mathematics',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'NUMBERS',
                            'sub_strands': [
                                {'name': 'Integers'},
                                {'name': 'Cubes and cube roots'},
                                {'name': 'Indices and logarithms'},
                                {'name': 'Compound proportions & rates of work'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'ALGEBRA',
                            'sub_strands': [
                                {'name': 'Matrices'},
                                {'name': 'Equations of straight lines'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Kiswahili',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {'number': 1, 'theme': 'USAFI WA MAZINGIRA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 2, 'theme': 'MAZOEZI YA VIOUNGO VYA MWILI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 3, 'theme': 'UTUNZAJI WA WANYAMA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 4, 'theme': 'UTUNZAJI WA MALIASILI', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                        {'number': 5, 'theme': 'MITAZAMO HASI WA KIJINSIA', 'sub_strands': [{'name': 'Kusikiliza na kuzungumza'}, {'name': 'Kusoma'}, {'name': 'Kuandika'}, {'name': 'Sarufi'}]},
                    ],
                },
                {
                    'subject': 'Social Studies',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'SST & PERSONAL DEVELOPMENT',
                            'sub_strands': [
                                {'name': 'Career choices'},
                                {'name': 'Entrepreneurial opportunities in SST'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'COMMUNITY SERVICE LEARNING',
                            'sub_strands': [
                                {'name': 'Identify a problem'},
                                {'name': 'Designing a solution'},
                                {'name': 'Plan to solve'},
                                {'name': 'Implement the plan'},
                                {'name': 'Write a report'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'PEOPLE, POPULATION & RELATIONSHIPS',
                            'sub_strands': [
                                {'name': 'Socio-economic practices of early humans'},
                                {'name': 'Indigenous knowledge systems in African societies'},
                                {'name': 'Poverty reduction'},
                                {'name': 'Population structure'},
                                {'name': 'Process & non-violent conflict resolution'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Integrated Science',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'MIXTURES, ELEMENTS & COMPOUNDS',
                            'sub_strands': [
                                {'name': 'Structure of the Atom', 'details': ['Atomic number and mass number of elements', 'Electron arrangement of elements', 'Energy level diagrams']},
                                {'name': 'Metals & non-metals', 'details': ['Metals and Alloys', 'Physical properties of alloys', 'Composition of alloys', 'Uses of metals and alloys in daily life']},
                                {'name': 'Water hardness', 'details': ['Physical properties of water', 'Hard and soft water', 'Methods of softening temporary hard water']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'LIVING THINGS & THEIR ENVIRONMENT',
                            'sub_strands': [
                                {'name': 'Nutrition in plants', 'details': ['Parts of a leaf', 'Adaptation of the leaf to photosynthesis', 'Structure of chloroplasts', 'Process of photosynthesis', 'Conditions necessary for photosynthesis']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Agriculture & Nutrition',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CONSERVATION OF RESOURCES',
                            'sub_strands': [
                                {'name': 'Conserving Animal feed: Hay', 'details': ['Methods of conserving forage in coping with drought', 'Conserve forage']},
                                {'name': 'Conserving leftover foods', 'details': ['Importance of conserving left over foods at home', 'Prepare leftover foods to avoid wastage']},
                                {'name': 'Integrated farming', 'details': ['Components of integrated farming', 'Making a model of integrated farming']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'FOOD PRODUCTION PROCESSES',
                            'sub_strands': [
                                {'name': 'Organic Gardening', 'details': ['Explaining organic gardening practices', 'Grown a crop using organic gardening practices']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Creative Arts',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'FOUNDATIONS OF CA&S',
                            'sub_strands': [
                                {'name': 'Careers in CA&S'},
                                {'name': 'Components of CA&S'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'CREATING & PERFORMING CA&S',
                            'sub_strands': [
                                {'name': 'Composing rhythm'},
                                {'name': 'Athletics'},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Pre-Technical Studies',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'FOUNDATION OF PRETECH STUD.',
                            'sub_strands': [
                                {'name': 'Safety on raised platforms', 'details': ['Types of raised platforms', 'Risks associated with raised platforms']},
                                {'name': 'Self-exploration & career Development', 'details': ['Ways of nurturing talents & abilities', 'Relating careers and abilities']},
                                {'name': 'Computer software', 'details': ['Categories of computer software', 'Functions of computer software', 'Using computer software']},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'COMMUNICATION',
                            'sub_strands': [
                                {'name': 'Oblique projection'},
                                {'name': 'Visual programming', 'details': ['Application characteristics of Visual programming', 'Creating application in Visual Programming']},
                            ],
                        },
                    ],
                },
                {
                    'subject': 'Christian Religious Education',
                    'scoring': 'ee_me_ae_be',
                    'strands': [
                        {
                            'number': 1,
                            'theme': 'CREATION',
                            'sub_strands': [
                                {'name': 'Work: God worked'},
                                {'name': 'Scriptures on works'},
                                {'name': 'Virtues related to Christian work'},
                                {'name': 'Choosing a career'},
                            ],
                        },
                        {
                            'number': 2,
                            'theme': 'THE BIBLE: SELECTED TEACHINGS',
                            'sub_strands': [
                                {'name': 'Christian values: sexual purity'},
                                {'name': 'Woman judge: Deborah'},
                                {'name': 'Kings David & Solomon'},
                            ],
                        },
                        {
                            'number': 3,
                            'theme': 'THE LIFE & MINISTRY OF JESUS CHRIST',
                            'sub_strands': [
                                {'name': "Raising the widow's son"},
                                {'name': 'Healing the 10 lepers'},
                            ],
                        },
                    ],
                },
            ],
        },
        {'term': 2, 'subjects': _jss_subjects('ee_me_ae_be')},
        {'term': 3, 'subjects': _jss_subjects('ee_me_ae_be')},
    ],
}


FRAMEWORK = [
    PLAYGROUP_FRAMEWORK,
    PP1_FRAMEWORK,
    PP2_FRAMEWORK,
    GRADE1_FRAMEWORK,
    GRADE2_FRAMEWORK,
    GRADE3_FRAMEWORK,
    GRADE4_FRAMEWORK,
    GRADE5_FRAMEWORK,
    GRADE6_FRAMEWORK,
    GRADE7_FRAMEWORK,
    GRADE8_FRAMEWORK,
    GRADE9_FRAMEWORK,
]
